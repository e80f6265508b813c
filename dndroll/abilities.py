from dndroll.constants import ABILITIES

def extract_ability_scores(rows):
	scores = {}
	for row in rows:
		if len(row) < 3:
			continue
		name = row[0].strip()
		if name not in ABILITIES:
			continue
		scores[ABILITIES[name]] = "%s (%s)" % (row[1].strip(), row[2].strip())
	return scores
