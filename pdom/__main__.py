""" Main entry point """

import sys
import importlib


valid_programs = [
    "pdom",
]

aliases = {
    'ipdom': 'pdom'
}


def main():
    if len(sys.argv) < 2:
        print_help_message()
    else:
        subcommand = sys.argv[1]
        subcommand = aliases.get(subcommand, subcommand)
        cmd_args = sys.argv[2:]
        if subcommand in valid_programs:
            m = importlib.import_module("pdom.cli." + subcommand)
            func = getattr(m, "main", None) or getattr(m, subcommand)
            func(cmd_args)
        else:
            print_help_message()


def print_help_message():
    print("Welcome to the pdom command line!")
    print()
    print("Please use one of the subcommands below:")
    for cmd in valid_programs:
        print("  $ python -m pdom {} -h".format(cmd))
    print()


if __name__ == "__main__":
    main()
