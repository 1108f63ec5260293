"""prints a few lazyq queries over a small sample, e.g. `python demo.py --verbose`"""

import argparse
import logging

from lazyq import Q, QueryOptions

# configure minimal logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(message)s')
logger = logging.getLogger(__name__)


def _show(label, values):
    print(f"{label}: {' '.join(str(v) for v in values)}")


def run(numbers, options: QueryOptions):
    source = Q(numbers, options)

    _show("numbers greater than 5", source.where(lambda n: n > 5))
    _show("squares of numbers", source.select(lambda n: n * n))
    _show("numbers sorted in ascending order", source.order_by(lambda n: n).to.list())

    print(f"sum: {source.stats.sum()}, min: {source.stats.min()}, max: {source.stats.max()}")
    print(f"count greater than 5: {source.to.count(lambda n: n > 5)}")

    people = Q([("Alice", 30), ("Bob", 25), ("Charlie", 35), ("Alice", 40), ("Eve", 28)], options)
    _show("people, first per name", people.set.distinct_by(lambda p: p[0]))

    teams = [(1, "a"), (2, "b")]
    members = [(1, "x"), (1, "y"), (3, "z")]
    _show("joined", Q(teams, options).join.join(members, lambda t: t[0], lambda m: m[0], lambda t, m: (t[1], m[1])))


def main():
    parser = argparse.ArgumentParser(description='lazyq demonstration')
    parser.add_argument('numbers', nargs='*', type=int, default=[1, 3, 5, 2, 8, 6, 7, 4, 10, 9],
                        help='numbers to query (default: 1 3 5 2 8 6 7 4 10 9)')
    parser.add_argument('--join-strategy', choices=['hash', 'nested'], default='hash', help='join algorithm')
    parser.add_argument('--verbose', action='store_true', help='Verbose logging')
    args = parser.parse_args()

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    options = QueryOptions(join_strategy=args.join_strategy)
    logger.info(f"options: {options.as_dict()}")
    run(args.numbers, options)


if __name__ == "__main__":
    main()
