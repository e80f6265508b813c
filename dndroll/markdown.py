from dndroll.constants import PLACEHOLDER_IMAGE

ABILITY_ORDER = ["STR", "DEX", "CON", "INT", "WIS", "CHA"]

def print_if_present(prefix, content):
	if content != "":
		return ["%s %s" % (prefix, content)]
	return []

def render_creature(struct):
	scores = struct['ability_scores']
	image_url = struct['image_url'] or PLACEHOLDER_IMAGE
	lines = [
		"{{monster,frame,wide",
		"{{wide",
		"# %s" % struct['name'],
		"### Challenge Rating: %s" % struct['challenge_rating'],
		"##### %s\n" % struct['creature_type'],
		"}}",
		"",
		"<img src=\"%s\" width=\"300\" />\n" % image_url,
		"::::",
		"___",
		"- **Armor Class:** :: %s" % struct['armor_class'],
		"- **Hit Points:** :: %s" % struct['hit_points'],
		"- **Speed:** :: %s" % struct['speed'],
		"___",
	]
	lines.extend(print_if_present("- **Skills:** ::", struct['skills']))
	lines.extend(print_if_present("- **Senses:** ::", struct['senses']))
	lines.extend(print_if_present("- **Languages:** ::", struct['languages']))
	lines.extend(print_if_present(
		"- **Proficiency Bonus:** ::", struct['proficiency_bonus']))
	lines.extend([
		"___",
		"| %s |" % " | ".join(ABILITY_ORDER),
		"|:---:|:---:|:---:|:---:|:---:|:---:|",
		"| %s |\n" % " | ".join([scores.get(a, "") for a in ABILITY_ORDER]),
		"___",
		"### Actions",
	])
	for action in struct['actions']:
		lines.append("- **%s:** :: %s" % (action['name'], action['description']))
	lines.extend(["", "::::", ""])

	descriptive = "{{descriptive,wide"
	if struct['description'] != "":
		descriptive += "\n### Description\n%s\n\n---\n\n" % struct['description']
	if len(struct['extra']) > 0:
		descriptive += "\n### Extra\n"
		descriptive += "".join(
			["- **%s:** %s\n" % (k, v) for k, v in struct['extra'].items()])
	lines.append(descriptive + "}}")
	lines.extend(["}}", "\\page"])
	return "\n".join(lines) + "\n"

def write_markdown(fp, struct):
	fp.write(render_creature(struct))
