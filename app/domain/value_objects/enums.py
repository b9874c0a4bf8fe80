"""Domain enums — pure Python, no external dependencies."""

from enum import Enum


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    OPTIONS = "OPTIONS"


class CoercionMode(str, Enum):
    LENIENT = "lenient"
    STRICT = "strict"
