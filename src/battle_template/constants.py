# =============================================================================
# POKEMON STATS - storage order used by every stat array in this package
# =============================================================================
STAT_HP = 0
STAT_ATK = 1
STAT_DEF = 2
STAT_SPEED = 3
STAT_SPATK = 4
STAT_SPDEF = 5
NUM_STATS = 6

# Labels indexed by storage position
STAT_NAMES = ("HP", "Atk", "Def", "Spe", "SpA", "SpD")

# =============================================================================
# POKEMON LIMITS
# =============================================================================
MIN_LEVEL = 1
MAX_LEVEL = 100
MAX_MON_MOVES = 4
MAX_FRIENDSHIP = 255
MAX_DYNAMAX_LEVEL = 10
NUM_NATURES = 25

# IV/EV limits
MAX_PER_STAT_IVS = 31
MAX_PER_STAT_DVS = 15  # Gen 1/2 determinant values
MAX_IV_VALUE = 0xFF  # u8 storage
MAX_EV_VALUE = 0xFFFF  # u16 storage

# =============================================================================
# TEMPLATE DEFAULTS
# =============================================================================
DEFAULT_LEVEL = 100
DEFAULT_FRIENDSHIP = 255
DEFAULT_EV = 0
DEFAULT_DYNAMAX_LEVEL = 10
NO_SELECTION = -1  # ability / nature / hidden power type not set

# =============================================================================
# TEXT FORMAT TOKENS
# =============================================================================
LINE_SPLIT = ": "
ITEM_SPLIT = " @ "
PAREN_JUNK = "()[]"
GMAX_SUFFIX = "-Gmax"
MOVE_MARKERS = ("-", "–")
MALE_SUFFIX = "(M)"
FEMALE_SUFFIX = "(F)"
NATURE_SUFFIX = "Nature"
TEAM_HEADER_PREFIX = "==="

# Longest valid line is ~74 characters (Gen 2 EVs)
MIN_LINE_LENGTH = 3
MAX_LINE_LENGTH = 80

DEFAULT_LANGUAGE = "en"
