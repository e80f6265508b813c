import re

def convert_speed(text):
	# "Speed 20 ft., burrow 5 ft." -> "20 ft (4 q, 6 m), burrow 5 ft."
	text = text.strip().removeprefix("Speed").strip()
	m = re.search(r"(\d+)\s*ft", text)
	if not m:
		return text
	feet = int(m.groups()[0])
	squares = feet / 5.0
	meters = squares * 1.5
	# %.0f rounds half to even: 25 ft is 7.5 m, rendered as 8 m
	speed = "%d ft (%.0f q, %.0f m)" % (feet, squares, meters)
	if text.find(",") > -1:
		speed += "," + text.split(",", 1)[1]
	return speed
