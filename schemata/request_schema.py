#Copyright (c) 2024 Vanderbilt University
#Authors: Jules White, Allen Karns, Karely Rodriguez, Max Moundas

"""
Mapping templates passed through to the API Gateway integration request, e.g.

request:
  template:
    application/json: |
      { "Data": "$util.base64Encode($input.body)" }
"""
request_schema = {
    "type": "object",
    "properties": {
        "template": {"type": "object"},
    },
    "required": ["template"],
    "additionalProperties": False,
}
