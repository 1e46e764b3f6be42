"""ID generation utilities for naming provisioned resources."""

from nanoid import generate

from idkit.alphabets import ID_VALID_NONSTART_CHARS
from idkit.config import settings
from idkit.encoding import make_id_from_hash
from idkit.identifiers import make_random_id, make_random_lowercase_id
from idkit.passwords import make_random_password


def gen_id(prefix: str, length: int | None = None) -> str:
    return f"{prefix}{make_random_id(settings.id_length if length is None else length)}"


def entity_id() -> str:
    return gen_id("en_")


def node_name() -> str:
    # Hostnames are case-insensitive, so stick to lowercase
    return f"node-{make_random_lowercase_id(settings.id_length)}"


def temp_file_name(suffix: str = "") -> str:
    return f"tmp-{make_random_lowercase_id(settings.id_length)}{suffix}"


def correlation_id(value: int) -> str:
    return f"cr_{make_id_from_hash(value)}"


def api_key() -> str:
    return f"pk_{generate(ID_VALID_NONSTART_CHARS, settings.api_key_length)}"


def one_time_password(length: int | None = None) -> str:
    return make_random_password(settings.password_length if length is None else length)
