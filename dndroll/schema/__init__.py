import os
import json
import jsonschema

SCHEMA_DIR = os.path.dirname(os.path.abspath(__file__))
CREATURE_SCHEMA = "creature.schema.json"

def validate_against_schema(data, schema_name=CREATURE_SCHEMA):
	with open(os.path.join(SCHEMA_DIR, schema_name)) as fp:
		schema = json.load(fp)
	jsonschema.validate(data, schema)
	return data
