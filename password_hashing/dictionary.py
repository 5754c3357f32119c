import logging
from typing import Iterable, Iterator, List, Tuple

import requests

logger = logging.getLogger(__name__)

WORDLIST_URL = "https://www.mit.edu/~ecprice/wordlist.10000"


def parse_words(lines: Iterable[str]) -> Iterator[Tuple[str, int]]:
    """
    Перетворює рядки словника на пари (слово, ранг).
    Ранг це номер рядка у файлі (з 1), тож порожні рядки теж його займають,
    хоча самі у таблиці не потрапляють.
    Відрізаються лише символи кінця рядка, слово інакше не змінюється.
    """
    for rank, line in enumerate(lines, start=1):
        word = line.rstrip("\r\n")
        if not word:
            continue
        yield word, rank


def fetch_word_list(url: str = WORDLIST_URL, timeout: float = 10.0) -> List[str]:
    """
    Завантажує словник з віддаленого статичного файлу.
    Помилки мережі та HTTP-статуси не 2xx передаються далі (requests.RequestException).
    """
    logger.info("Fetching word list from %s", url)
    response = requests.get(url, timeout=timeout)
    response.raise_for_status()
    lines = response.text.splitlines()
    logger.info("Fetched %d lines", len(lines))
    return lines


def read_word_file(path: str) -> List[str]:
    """Читає локальний словник (UTF-8, одне слово на рядок)."""
    logger.info("Reading word list from %s", path)
    with open(path, "r", encoding="utf-8") as f:
        return f.read().splitlines()
