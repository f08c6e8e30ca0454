#!/usr/bin/env python3
"""
Name: echor
Description: echo arguments
License: perl

Prints the command line arguments separated by spaces. A newline is
printed at the end unless the '-n' option is given. The '-n' option may
appear anywhere on the command line, before, after or between the words
to print. At least one word is required; invoking echor with nothing to
print is a usage error.
"""

import os
import sys
import argparse

__version__ = "0.1.0"

EX_SUCCESS = 0
EX_FAILURE = 1

Me = os.path.basename(sys.argv[0])

def usage_text():
    """Returns the usage block shared by the help and error paths."""
    return f"""USAGE:
    {Me} [FLAGS] <TEXT>...

FLAGS:
    -h, --help       Prints help information
    -n               Do not print newline
    -V, --version    Prints version information

ARGS:
    <TEXT>...    Input text
"""

def usage():
    """Prints usage message to stderr and exits with failure."""
    sys.stderr.write(usage_text())
    sys.exit(EX_FAILURE)

def help_message():
    """Prints the help text to stdout and exits."""
    sys.stdout.write(f"{Me} {__version__}\nEcho arguments to standard output\n\n")
    sys.stdout.write(usage_text())
    sys.exit(EX_SUCCESS)

def echo_text(words, newline=True):
    """
    Joins the words with single spaces, adding a trailing newline
    unless told not to. Words are never split or interpreted, so any
    whitespace inside a single argument is kept as-is.
    """
    output_string = " ".join(words)
    if newline:
        output_string += "\n"
    return output_string

def parse_args(argv):
    """
    Parses the command line. Any failure, including the missing TEXT
    argument, ends in usage(). Everything after the first '--' is text,
    even words that look like options.
    """
    if not argv:
        usage()

    if '--' in argv:
        split = argv.index('--')
        options, literal = argv[:split], argv[split + 1:]
    else:
        options, literal = argv, []

    # argparse would treat -h as an unknown option once add_help is off,
    # so look for it up front, the same way grep does.
    if '-h' in options or '--help' in options:
        help_message()

    parser = argparse.ArgumentParser(
        prog=Me,
        add_help=False,
        allow_abbrev=False,
        usage=argparse.SUPPRESS
    )
    parser.add_argument('-n', dest='omit_newline', action='store_true')
    parser.add_argument(
        '-V', '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )
    parser.add_argument('text', nargs='*')

    # Intermixed parsing lets '-n' sit between words: "Hello -n there".
    try:
        args = parser.parse_intermixed_args(options)
    except SystemExit as e:
        # --version exits cleanly through argparse; let that one through.
        if e.code == EX_SUCCESS:
            raise
        usage()

    args.text.extend(literal)
    if not args.text:
        usage()
    return args

def main(argv=None):
    """Parses arguments and writes the joined words to stdout."""
    if argv is None:
        argv = sys.argv[1:]

    args = parse_args(argv)

    try:
        sys.stdout.write(echo_text(args.text, newline=not args.omit_newline))
        sys.stdout.flush()
    except BrokenPipeError:
        # The reader went away, as with `echor ... | true`. Silence stderr
        # so the interpreter has nowhere to report the failed flush.
        sys.stderr.close()

    sys.exit(EX_SUCCESS)

if __name__ == "__main__":
    main()
