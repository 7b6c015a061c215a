"""Names of the PGN headers and comment commands found in Lichess exports."""

# Comment commands
EVAL = b"%eval"
CLK = b"%clk"

# Headers
SITE = b"Site"

TIME_CONTROL = b"TimeControl"
RESULT = b"Result"
TERMINATION = b"Termination"

DATE = b"Date"
UTC_DATE = b"UTCDate"
UTC_TIME = b"UTCTime"

EVENT = b"Event"
ROUND = b"Round"

OPENING = b"Opening"
ECO = b"ECO"

WHITE = b"White"
WHITE_ELO = b"WhiteElo"
WHITE_RATING_DIFF = b"WhiteRatingDiff"
WHITE_TITLE = b"WhiteTitle"

BLACK = b"Black"
BLACK_ELO = b"BlackElo"
BLACK_RATING_DIFF = b"BlackRatingDiff"
BLACK_TITLE = b"BlackTitle"