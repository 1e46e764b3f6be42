"""Random identifiers, passwords and compact value encodings."""

from idkit.encoding import (
    get_base64_id_from_value,
    make_id_from_hash,
    make_random_base64_id,
)
from idkit.errors import IdkitError, InvalidArgument
from idkit.identifiers import is_valid_token, make_random_id
from idkit.ids import api_key, gen_id
from idkit.passwords import make_random_password
from idkit.random_source import fast_source, secure_source

__version__ = "0.1.0"

__all__ = [
    "IdkitError",
    "InvalidArgument",
    "api_key",
    "fast_source",
    "gen_id",
    "get_base64_id_from_value",
    "is_valid_token",
    "make_id_from_hash",
    "make_random_base64_id",
    "make_random_id",
    "make_random_password",
    "secure_source",
]
