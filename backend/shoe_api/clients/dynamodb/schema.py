# Copyright © Amazon.com and Affiliates: This deliverable is considered Developed Content as defined in the AWS Service
# Terms and the SOW between the parties dated 2025.

"""DynamoDB schema definition for the shoes table."""

from typing import Any

SHOE_KEY_ATTRIBUTE = 'shoeId'


def get_table_schema(table_name: str) -> dict[str, Any]:
    """Get the CreateTable request for the shoes table."""
    return {
        'TableName': table_name,
        'KeySchema': [
            {'AttributeName': SHOE_KEY_ATTRIBUTE, 'KeyType': 'HASH'},
        ],
        'AttributeDefinitions': [
            {'AttributeName': SHOE_KEY_ATTRIBUTE, 'AttributeType': 'S'},
        ],
        'BillingMode': 'PAY_PER_REQUEST',
    }
