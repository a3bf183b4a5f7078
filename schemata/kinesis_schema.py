#Copyright (c) 2024 Vanderbilt University
#Authors: Jules White, Allen Karns, Karely Rodriguez, Max Moundas

from schemata.common_schema import entry_schema, proxy_schema
from schemata.key_schemas import partition_key, string_or_ref
from schemata.request_schema import request_schema

kinesis_schema = entry_schema(
    "kinesis",
    proxy_schema(
        {
            "streamName": string_or_ref,
            "partitionKey": partition_key,
            "request": request_schema,
        },
        required=["streamName"],
    ),
)
