# Content lines folded into a partial stat block. "Description" and "Actions"
# header lines switch mode, every other line goes to the first matching rule.

import re
from dndroll.speed import convert_speed

NORMAL = "normal"
DESCRIPTION = "description"
ACTIONS = "actions"

SECTIONS = {
	"actions": ACTIONS,
	"description": DESCRIPTION,
}

def new_state():
	return {
		"mode": NORMAL,
		"stat_block": {},
		"diagnostics": [],
	}

def strip_label(text, label):
	return text.removeprefix(label).strip()

def add_diagnostic(state, subtype, text):
	state['diagnostics'].append({
		"type": "diagnostic",
		"subtype": subtype,
		"text": text
	})

def contains(token):
	def _contains_impl(_, text):
		return text.find(token) > -1
	return _contains_impl

def starts_with(token):
	def _starts_with_impl(_, text):
		return text.startswith(token)
	return _starts_with_impl

def is_action(state, text):
	return state['mode'] == ACTIONS or text.find("Attack:") > -1

def is_creature_type(_, text):
	if text.find("beast") == -1:
		return False
	return re.search(r"\w+ beast, \w+", text) is not None

def always(_, __):
	return True

def handle_label(label, field):
	def _handle_label_impl(state, text):
		state['stat_block'][field] = strip_label(text, label)
		return field
	return _handle_label_impl

def handle_speed(state, text):
	state['stat_block']['speed'] = convert_speed(text)
	return "speed"

def handle_challenge(state, text):
	parts = text.split()
	if len(parts) < 2:
		add_diagnostic(state, "malformed_challenge_line", text)
		return "discard"
	state['stat_block']['challenge_rating'] = parts[1]
	return "challenge_rating"

def handle_action(state, text):
	# Bite. Melee Weapon Attack: +4 to hit, reach 5 ft., one target.
	name = text.split(".")[0]
	state['stat_block'].setdefault('actions', []).append({
		"name": name,
		"description": text.removeprefix(name + ".").strip()
	})
	return "action"

def handle_creature_type(state, text):
	state['stat_block']['creature_type'] = text
	return "creature_type"

def handle_trait(state, text):
	# Keen Smell. The wolf has advantage on Wisdom (Perception) checks...
	if text.find(".") == -1:
		return "discard"
	name, rest = [p.strip() for p in text.split(".", 1)]
	if name == "Source":
		return "discard"
	state['stat_block'].setdefault('extra', {})[name] = rest
	return "extra"

STAT_BLOCK_RULES = [
	(contains("Armor Class"), handle_label("Armor Class", "armor_class")),
	(contains("Hit Points"), handle_label("Hit Points", "hit_points")),
	(contains("Speed"), handle_speed),
	(starts_with("Challenge"), handle_challenge),
	(starts_with("Skills"), handle_label("Skills", "skills")),
	(starts_with("Senses"), handle_label("Senses", "senses")),
	(starts_with("Languages"), handle_label("Languages", "languages")),
	(starts_with("Proficiency Bonus"),
		handle_label("Proficiency Bonus", "proficiency_bonus")),
	(is_action, handle_action),
	(is_creature_type, handle_creature_type),
	(always, handle_trait),
]

def classify_line(state, line):
	text = line.strip()
	lower = text.lower()
	if lower in SECTIONS:
		state['mode'] = SECTIONS[lower]
		return "section"
	if state['mode'] == DESCRIPTION:
		sb = state['stat_block']
		sb['description'] = sb.get('description', "") + text + "\n\n"
		return "description"
	for test, handler in STAT_BLOCK_RULES:
		if test(state, text):
			return handler(state, text)
	assert False, "Unclassified line: %s" % text

def stat_block_pass(lines):
	state = new_state()
	for line in lines:
		if line.strip() == "":
			continue
		classify_line(state, line)
	return state
