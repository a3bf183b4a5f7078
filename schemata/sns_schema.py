#Copyright (c) 2024 Vanderbilt University
#Authors: Jules White, Allen Karns, Karely Rodriguez, Max Moundas

from schemata.common_schema import entry_schema, proxy_schema
from schemata.key_schemas import string_or_get_att
from schemata.request_schema import request_schema

sns_schema = entry_schema(
    "sns",
    proxy_schema(
        {
            "topicName": string_or_get_att("topicName", "TopicName"),
            "request": request_schema,
        },
        required=["topicName"],
    ),
)
