from enum import Enum


class SnakType(str, Enum):
    VALUE = "value"
    NOVALUE = "novalue"
    SOMEVALUE = "somevalue"
