from enum import Enum


TOKEN_TYPE = "JWT"
SEGMENT_SEPARATOR = "."


class Algorithm(Enum):
    HS256 = "HS256"


class ApiKeyField(Enum):
    NAME = "api_key_name"
    ID = "api_key_id"
