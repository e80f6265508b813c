import sys
import os
from optparse import OptionParser


def exec_main(options, args, function):
    if not options.output and not options.dryrun:
        sys.stderr.write("-o/--output required\n")
        sys.exit(1)
    if not options.dryrun and not os.path.exists(options.output):
        sys.stderr.write(
            "-o/--output points to a directory that does not exist\n")
        sys.exit(1)
    if not options.dryrun and not os.path.isdir(options.output):
        sys.stderr.write(
            "-o/--output points to a file, it must point to a directory\n")
        sys.exit(1)
    if len(args) == 0:
        sys.stderr.write("at least one page, file or listing url required\n")
        sys.exit(1)
    return function(args, options)


def option_parser(usage, filename):
    parser = OptionParser(usage=usage)
    parser.add_option(
        "-o", "--output", dest="output",
        help="Output directory for the markdown and json files. (required)")
    parser.add_option(
        "-f", "--filename", dest="filename", default=filename,
        help="Markdown file name inside the output directory (default: %default)")
    parser.add_option(
        "-l", "--listing", dest="listing", default=False, action="store_true",
        help="Arguments are listing pages, every page linked from them is crawled")
    parser.add_option(
        "-j", "--json", dest="json", default=False, action="store_true",
        help="Also write one json file per page")
    parser.add_option(
        "-s", "--stdout", dest="stdout", default=False, action="store_true",
        help="Print json to stdout")
    parser.add_option(
        "-k", "--skip-schema", dest="skip_schema", default=False, action="store_true",
        help="Skip schema validation")
    parser.add_option(
        "-d", "--dry-run", dest="dryrun", default=False, action="store_true",
        help="Parse only, write no files")
    return parser
