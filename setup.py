from setuptools import setup, find_namespace_packages

# --- CONFIGURATION ---
# No __init__.py anywhere, so packages are picked up as namespace packages
packages = find_namespace_packages(include=["gatos", "gatos.*"])

# --- BUILD ---
setup(
	name="gatos",
	version="0.1.0",
	description="Logic gate canvas with grid placement and orthogonal wire routing",
	python_requires=">=3.10",
	packages=packages,
	install_requires=[
		"PySide6>=6.5",
	],
	extras_require={
		"test": ["pytest>=7"],
	},
	entry_points={
		"console_scripts": [
			"gatos = gatos.main:main",
			"gatos-serve = gatos.server.static:main",
		],
	},
)
