import os
import json
import sys
from bs4 import BeautifulSoup
from wikidot.utils import normalize_lines, table_rows, get_text, absolute_url
from wikidot.files import makedirs, char_replace
from dndroll.constants import BASE_URL, ABILITY_TABLE_SELECTOR
from dndroll.stat_block import stat_block_pass
from dndroll.abilities import extract_ability_scores
from dndroll.schema import validate_against_schema
from dndroll.markdown import write_markdown

STRING_FIELDS = [
	"name", "challenge_rating", "creature_type", "image_url",
	"armor_class", "hit_points", "speed", "skills", "senses",
	"languages", "proficiency_bonus", "description"]

def new_creature():
	creature = {
		"type": "creature",
		"game-obj": "Beasts",
		"ability_scores": {},
		"actions": [],
		"extra": {},
		"diagnostics": [],
	}
	for field in STRING_FIELDS:
		creature[field] = ""
	return creature

def build_creature(name, image_url, state, ability_scores):
	struct = new_creature()
	struct['name'] = name
	struct['image_url'] = image_url
	for k, v in state['stat_block'].items():
		assert k in struct, "Unknown stat block field: %s" % k
		struct[k] = v
	struct['ability_scores'] = dict(ability_scores)
	struct['diagnostics'] = list(state['diagnostics'])
	return struct

def extract_creature(lines, rows, name="", image_url=""):
	state = stat_block_pass(lines)
	return build_creature(name, image_url, state, extract_ability_scores(rows))

def parse_creature_page(html, base_url=BASE_URL):
	soup = BeautifulSoup(html, "lxml")
	name = ""
	title = soup.find(id="page-title")
	if title:
		name = get_text(title).strip()
	content = soup.find(id="page-content")
	if not content:
		return extract_creature([], [], name)
	image_url = ""
	img = content.find("img", {"class": "image"})
	if img and img.has_attr("src"):
		image_url = absolute_url(base_url, img["src"])
	lines = normalize_lines(str(content))
	rows = table_rows(soup, ABILITY_TABLE_SELECTOR)
	return extract_creature(lines, rows, name, image_url)

def report_diagnostics(struct):
	for diagnostic in struct['diagnostics']:
		sys.stderr.write("%s: %s: %s\n" % (
			struct['name'], diagnostic['subtype'], diagnostic['text']))

def parse_creature(source, html, options, fp=None):
	if not options.stdout:
		sys.stderr.write("%s\n" % os.path.basename(source))
	struct = parse_creature_page(html)
	report_diagnostics(struct)
	if not options.skip_schema:
		validate_against_schema(struct)
	if not options.dryrun:
		if fp:
			write_markdown(fp, struct)
		if options.json:
			jsondir = makedirs(options.output, struct['game-obj'])
			write_creature(jsondir, struct)
	if options.stdout:
		print(json.dumps(struct, indent=2))
	return struct

def write_creature(jsondir, struct):
	print("%s: %s" %(struct['game-obj'], struct['name']))
	filename = create_creature_filename(jsondir, struct)
	if os.path.exists(filename):
		sys.stderr.write("%s: overwriting %s\n" % (struct['name'], filename))
	with open(filename, 'w') as fp:
		json.dump(struct, fp, indent=4)

def create_creature_filename(jsondir, struct):
	title = jsondir + "/" + char_replace(struct['name'] or "unnamed") + ".json"
	return os.path.abspath(title)
