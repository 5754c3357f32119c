import argparse
import logging
from time import perf_counter
from typing import List, Optional, Sequence

import requests

from password_hashing.dictionary import WORDLIST_URL, fetch_word_list, parse_words, read_word_file
from password_hashing.evaluator import StrengthReport, TableFamily, build_tables, check_password_strength
from password_hashing.probing_table import CapacityExceededError

logger = logging.getLogger(__name__)

CHAINING_TABLE_SIZE = 1000
PROBING_TABLE_SIZE = 20000
MIN_PASSWORD_LENGTH = 8

TEST_PASSWORDS = [
    "account8",
    "accountability",
    "9a$D#qW7!uX&Lv3zT",
    "B@k45*W!c$Y7#zR9P",
    "X$8vQ!mW#3Dz&Yr4K5",
]


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="password_hashing",
        description="Перевірка паролів за словником: ланцюжки проти лінійного пробування",
    )
    parser.add_argument("passwords", nargs="*", help="паролі для перевірки")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--url", default=WORDLIST_URL, help="адреса словника")
    source.add_argument("--file", help="локальний файл словника")
    parser.add_argument("--chaining-size", type=int, default=CHAINING_TABLE_SIZE)
    parser.add_argument("--probing-size", type=int, default=PROBING_TABLE_SIZE)
    parser.add_argument("--min-length", type=int, default=MIN_PASSWORD_LENGTH)
    parser.add_argument("--timeout", type=float, default=10.0, help="таймаут завантаження, сек.")
    parser.add_argument(
        "--exhaustive",
        action="store_true",
        help="опитувати всі таблиці, навіть після першого збігу",
    )
    parser.add_argument("-v", "--verbose", action="count", default=0)
    return parser.parse_args(argv)


def load_lines(args: argparse.Namespace) -> List[str]:
    if args.file:
        return read_word_file(args.file)
    return fetch_word_list(args.url, timeout=args.timeout)


def print_load_summary(tables: TableFamily, elapsed: float) -> None:
    print(f"Словник завантажено за {elapsed:.4f} сек.")
    header = f"{'Таблиця':<46}{'Записів':>10}{'Заповнення':>14}"
    print(header)
    print("-" * len(header))
    for label, table in tables.items():
        print(f"{label:<46}{len(table):>10}{table.load_factor():>14.3f}")


def print_report(report: StrengthReport) -> None:
    print(f"\nПароль: {report.password}")
    if report.too_short:
        print("Пароль занадто короткий.")
    if report.in_dictionary:
        print("Пароль є словниковим словом або словом з цифрами.")
    if report.is_strong:
        print("Пароль надійний.")

    for label, count in report.comparisons.items():
        print(f"{label}: {count} (+{report.spent[label]})")


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    level = {0: logging.WARNING, 1: logging.INFO}.get(args.verbose, logging.DEBUG)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    # 1. Завантаження словника
    start = perf_counter()
    try:
        lines = load_lines(args)
    except (requests.RequestException, OSError) as exc:
        logger.error("Cannot load word list: %s", exc)
        return 1

    try:
        # 2. Заповнення таблиць
        tables = build_tables(parse_words(lines), args.chaining_size, args.probing_size)
        elapsed = perf_counter() - start
        print_load_summary(tables, elapsed)

        # 3. Перевірка паролів
        for password in args.passwords or TEST_PASSWORDS:
            report = check_password_strength(
                password, tables, min_length=args.min_length, exhaustive=args.exhaustive
            )
            print_report(report)
    except (ValueError, CapacityExceededError) as exc:
        logger.error("Invalid table configuration: %s", exc)
        return 1
    return 0
