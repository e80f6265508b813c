import os
import sys
import jsonschema
import requests
from wikidot.options import option_parser, exec_main
from wikidot.fetch import get_session, fetch_page, crawl
from dndroll.constants import BASE_URL, ETHICAL_SLEEP, LISTING_SELECTOR
from dndroll.constants import MARKDOWN_FILENAME
from dndroll.creatures import parse_creature


def beasts_option_parser():
    return option_parser(
        "usage: %prog [options] [html files, page urls or listing urls]",
        MARKDOWN_FILENAME)


def is_url(arg):
    return arg.startswith("http://") or arg.startswith("https://")


def parse_beasts(args, options, session=None):
    if not session:
        session = get_session()
    errors = []

    def _parse(source, html):
        try:
            parse_creature(source, html, options, fp)
        except jsonschema.ValidationError as e:
            sys.stderr.write("%s: %s\n" % (source, e.message))
            errors.append(source)

    fp = None
    if not options.dryrun:
        fp = open(os.path.join(options.output, options.filename), 'w')
    try:
        for arg in args:
            try:
                if options.listing:
                    crawl(session, arg, BASE_URL, LISTING_SELECTOR, _parse,
                        sleep=ETHICAL_SLEEP)
                elif is_url(arg):
                    _parse(arg, fetch_page(session, arg))
                else:
                    with open(arg, "rb") as html:
                        _parse(arg, html.read())
            except (requests.RequestException, OSError) as e:
                sys.stderr.write("%s: %s\n" % (arg, e))
                errors.append(arg)
    finally:
        if fp:
            fp.close()
    return errors


def main():
    parser = beasts_option_parser()
    (options, args) = parser.parse_args()
    errors = exec_main(options, args, parse_beasts)
    if errors:
        sys.exit(1)


if __name__ == "__main__":
    main()
