#Copyright (c) 2024 Vanderbilt University
#Authors: Jules White, Allen Karns, Karely Rodriguez, Max Moundas

from schemata.common_schema import entry_schema, proxy_schema
from schemata.key_schemas import key, string_or_ref

S3_ACTIONS = ["GetObject", "PutObject", "DeleteObject"]

s3_schema = entry_schema(
    "s3",
    proxy_schema(
        {
            "action": {"type": "string", "enum": S3_ACTIONS},
            "bucket": string_or_ref,
            "key": key,
        },
        required=["action", "bucket", "key"],
    ),
)
