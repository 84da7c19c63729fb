from enum import Enum


class StrEnum(str, Enum):
    pass


class QueueStep(StrEnum):
    INSERT_HEAD = "INSERT_HEAD"
    INSERT_TAIL = "INSERT_TAIL"
    REMOVE_HEAD = "REMOVE_HEAD"
    REVERSE = "REVERSE"
    SPLIT = "SPLIT"
    MERGE = "MERGE"
    SORT = "SORT"


VERBOSE = 5
