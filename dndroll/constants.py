BASE_URL = "http://dndroll.wikidot.com"

# Seconds between page fetches while crawling a listing
ETHICAL_SLEEP = 0.5

LISTING_SELECTOR = "div[style*='width: 33%'] p a:not(.newpage):not([href*='#toc'])"
ABILITY_TABLE_SELECTOR = "table.wiki-content-table tr"

PLACEHOLDER_IMAGE = "https://www.pngfind.com/pngs/m/266-2663967_d-d-logo-png-dungeons-dragons-transparent-png.png"

MARKDOWN_FILENAME = "beasts.md"

ABILITIES = {
	"Strength": "STR",
	"Dexterity": "DEX",
	"Constitution": "CON",
	"Intelligence": "INT",
	"Wisdom": "WIS",
	"Charisma": "CHA",
}
