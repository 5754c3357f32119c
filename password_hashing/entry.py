from dataclasses import dataclass


@dataclass(frozen=True)
class Entry:
    key: str
    rank: int  # позиція слова у словнику (з 1), лише корисне навантаження
