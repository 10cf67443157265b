# 유틸리티 함수 패키지

from .password import Password, generate_friendly_password
from .randomize import random_between, random_char_from_string
from .salted_hasher import (
    SaltedHasher,
    generate_salt,
    hash_value,
    salted_hasher,
    validate_hash,
)
from .validators import is_null_or_empty, is_valid_email, is_valid_phone_number

__all__ = [
    "SaltedHasher",
    "salted_hasher",
    "generate_salt",
    "hash_value",
    "validate_hash",
    "Password",
    "generate_friendly_password",
    "random_between",
    "random_char_from_string",
    "is_null_or_empty",
    "is_valid_email",
    "is_valid_phone_number",
]
