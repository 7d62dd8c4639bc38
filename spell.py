import argparse

from number_words import numbers_to_words
from plotting import plot_word_lengths


def main(argv=None):
    parser = cmdline_parser()
    args = parser.parse_args(argv)

    try:
        if args.spell is not None:
            words = numbers_to_words(args.spell, capitalize=args.capitalize)
            for value, spelled in zip(args.spell, words):
                print(f"{value}: {spelled}")
            return 0

        if args.plot:
            path = plot_word_lengths(range(0, 100), args.plot, capitalize=args.capitalize)
            print(f"Saved plot to {path}")
            return 0
    except ValueError as exc:
        print(f"ERROR: {exc}")
        return 1

    parser.print_help()
    return 0


def cmdline_parser():
    parser = argparse.ArgumentParser(
        description="Spell out numbers from 0 to 99 in English words.",
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--spell",
        type=int,
        nargs="+",
        help="Print the spelled-out form of one or more integers.",
    )
    group.add_argument(
        "--plot",
        type=str,
        help="Save a bar chart of word lengths for 0..99 to the given PNG path.",
    )
    parser.add_argument(
        "--capitalize",
        action="store_true",
        help="Upper-case the first letter of each spelled-out number.",
    )
    return parser


if __name__ == "__main__":
    raise SystemExit(main())
