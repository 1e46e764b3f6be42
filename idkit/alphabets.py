"""Standard character sets.

The order of each set is significant: the deterministic encoders index
into these strings, so reordering them changes every encoded value.
"""

UPPER_CASE_ALPHA = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
LOWER_CASE_ALPHA = "abcdefghijklmnopqrstuvwxyz"
NUMERIC = "1234567890"
NON_ALPHA_NUMERIC = "!@$%^&*()-_=+[]{};:\\|/?,.<>~"

# Safe as the first / subsequent characters of a programming-language identifier
IDENTIFIER_START_CHARS = UPPER_CASE_ALPHA + LOWER_CASE_ALPHA
IDENTIFIER_NONSTART_CHARS = IDENTIFIER_START_CHARS + NUMERIC

ID_VALID_START_CHARS = UPPER_CASE_ALPHA + LOWER_CASE_ALPHA
ID_VALID_NONSTART_CHARS = ID_VALID_START_CHARS + NUMERIC

BASE64_VALID_CHARS = ID_VALID_NONSTART_CHARS + "+="

PASSWORD_VALID_CHARS = NON_ALPHA_NUMERIC + ID_VALID_NONSTART_CHARS

LOWERCASE_ID_START_CHARS = LOWER_CASE_ALPHA
LOWERCASE_ID_NONSTART_CHARS = LOWER_CASE_ALPHA + NUMERIC
