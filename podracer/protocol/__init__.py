from podracer.protocol.reader import (
    RaceHeader,
    parse_ints,
    read_pod,
    read_race_header,
    read_turn,
)

__all__ = ["RaceHeader", "parse_ints", "read_pod", "read_race_header", "read_turn"]
