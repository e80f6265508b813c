import warnings
from bs4 import BeautifulSoup, MarkupResemblesLocatorWarning
warnings.filterwarnings("ignore", category=MarkupResemblesLocatorWarning)

def filter_entities(text):
	text = text.replace("\u00e2\u0080\u0093", "\u2013")
	text = text.replace("\u00e2\u0080\u0094", "\u2014")
	text = text.replace("\u00e2\u0080\u0099", "\u2019")
	text = text.replace("\u00c2\u00a0", " ")
	text = text.replace("\u00a0", " ")
	return text

def get_text(detail):
	return detail.get_text()

def br_filter(soup):
	for br in soup.find_all('br'):
		br.replace_with("\n")
	return soup

def normalize_lines(html):
	bs = br_filter(BeautifulSoup(html, 'html.parser'))
	lines = []
	for line in get_text(bs).split("\n"):
		line = filter_entities(line).strip()
		if line != "":
			lines.append(line)
	return lines

def table_rows(soup, selector):
	rows = []
	for tr in soup.select(selector):
		rows.append([get_text(td) for td in tr.find_all('td')])
	return rows

def absolute_url(base_url, href):
	if href.startswith("http"):
		return href
	return base_url + href
