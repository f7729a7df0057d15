"""Create the pending-jobs table and seed workflow parameters.

Usage:
    python scripts/bootstrap_localstack.py --endpoint-url http://localhost:4566
"""

from __future__ import annotations

import argparse
from typing import Any

import boto3

from mediaingester.core import constants

DEFAULT_TABLE_NAME = "mediaingester-pending-jobs"

DEFAULT_PARAMETERS: dict[str, str] = {
    constants.INPUTS_ROOT_PATH_PARAM: "inputs",
    constants.OUTPUTS_ROOT_PATH_PARAM: "outputs",
    constants.MIN_MODERATION_CONFIDENCE_PARAM: "60",
    constants.MIN_KEYWORD_CONFIDENCE_PARAM: "70",
    constants.VOICE_ID_PARAM: "Joanna",
    constants.THUMBNAIL_MAX_DIMENSION_PARAM: str(constants.DEFAULT_THUMBNAIL_MAX_DIMENSION),
    constants.PENDING_JOBS_TABLE_PARAM: DEFAULT_TABLE_NAME,
}


def create_job_table(ddb: Any, table_name: str = DEFAULT_TABLE_NAME) -> bool:
    """Create the pending-jobs table. Returns False if it already exists."""
    client = ddb.meta.client
    if table_name in client.list_tables().get("TableNames", []):
        print(f"  Table {table_name} already exists, skipping")
        return False
    client.create_table(
        TableName=table_name,
        KeySchema=[{"AttributeName": constants.PENDING_JOBS_JOB_ID_ATTR, "KeyType": "HASH"}],
        AttributeDefinitions=[
            {"AttributeName": constants.PENDING_JOBS_JOB_ID_ATTR, "AttributeType": "S"},
        ],
        BillingMode="PAY_PER_REQUEST",
    )
    print(f"  Created table {table_name}")
    return True


def seed_parameters(ssm: Any, values: dict[str, str]) -> None:
    """Write parameters as plain strings, overwriting existing values."""
    for name, value in values.items():
        ssm.put_parameter(Name=name, Value=value, Type="String", Overwrite=True)
    print(f"  Seeded {len(values)} parameters")


def main() -> None:
    parser = argparse.ArgumentParser(description="Bootstrap Media Ingester resources")
    parser.add_argument("--endpoint-url", default=None, help="AWS endpoint (e.g. http://localhost:4566)")
    parser.add_argument("--table-name", default=DEFAULT_TABLE_NAME, help="Pending-jobs table name")
    parser.add_argument("--region", default="us-east-1", help="AWS region")
    parser.add_argument("--param", action="append", default=[], metavar="NAME=VALUE",
                        help="Extra or overriding parameter, e.g. /mediaingester/statemachine-arn=arn:...")
    args = parser.parse_args()

    kwargs: dict[str, Any] = {"region_name": args.region}
    if args.endpoint_url:
        kwargs["endpoint_url"] = args.endpoint_url

    values = dict(DEFAULT_PARAMETERS)
    values[constants.PENDING_JOBS_TABLE_PARAM] = args.table_name
    for item in args.param:
        name, sep, value = item.partition("=")
        if not sep:
            parser.error(f"--param expects NAME=VALUE, got {item!r}")
        values[name] = value

    print("Creating table...")
    create_job_table(boto3.resource("dynamodb", **kwargs), args.table_name)

    print("Seeding parameters...")
    seed_parameters(boto3.client("ssm", **kwargs), values)

    print("Done!")


if __name__ == "__main__":
    main()
