from enum import IntEnum





###======= GATE KIND =======###
class GateKind(IntEnum):
	AND = 0
	OR  = 1
	NOT = 2

	@property
	def label(self) -> str:
		return f"{self.name.capitalize()} Gate"



###======= GATE STATE =======###
class GateState(IntEnum):
	PALETTE_IDLE = 0
	UNPLACED     = 1
	PLACED       = 2



###======= WIRE CAPTURE =======###
class CaptureState(IntEnum):
	IDLE      = 0
	CAPTURING = 1



###======= LOGICAL BUTTONS =======###
class Button(IntEnum):
	PRIMARY   = 0    # place / drag
	SECONDARY = 1    # wire drawing
