import sys
import time
import requests
from bs4 import BeautifulSoup
from wikidot.utils import absolute_url

USER_AGENT = "dndroll-beasts/0.1"


def get_session(user_agent=USER_AGENT):
    session = requests.Session()
    session.headers.update({'User-Agent': user_agent})
    return session


def fetch_page(session, url, timeout=30):
    response = session.get(url, timeout=timeout)
    response.raise_for_status()
    return response.text


def find_links(html, base_url, selector):
    soup = BeautifulSoup(html, "lxml")
    links = []
    for a in soup.select(selector):
        if not a.has_attr('href'):
            continue
        links.append(absolute_url(base_url, a['href']))
    return links


def crawl(session, listing_url, base_url, selector, function, sleep=0.5):
    # a page that cannot be fetched is skipped, a listing that cannot be
    # fetched raises
    html = fetch_page(session, listing_url)
    links = find_links(html, base_url, selector)
    for i, url in enumerate(links):
        if i > 0:
            time.sleep(sleep)
        sys.stderr.write("Scraping: %s\n" % url)
        try:
            page = fetch_page(session, url)
        except requests.RequestException as e:
            sys.stderr.write("%s: %s\n" % (url, e))
            continue
        function(url, page)
    return links
