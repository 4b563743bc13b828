"""Sample input templates and the starter graph offered by the designer."""

import copy
from typing import Any

CUSTOMER_PROFILE: dict[str, Any] = {
    "customer": {
        "id": 1,
        "name": "John Doe",
        "age": 25,
        "email": "john.doe@example.com",
        "eligible": False,
        "accountType": "premium",
        "balance": 1500.50,
    }
}

ORDER_PROCESSING: dict[str, Any] = {
    "order": {
        "id": 101,
        "amount": 299.99,
        "items": 3,
        "category": "electronics",
        "priority": "normal",
    },
    "customer": {"id": 1, "membershipLevel": "gold"},
}

COMPLEX_SCENARIO: dict[str, Any] = {
    "customer": CUSTOMER_PROFILE["customer"],
    "order": {
        "id": 101,
        "amount": 299.99,
        "items": 3,
        "category": "electronics",
    },
    "context": {"timestamp": "2024-01-01T00:00:00Z", "source": "web"},
}

INPUT_TEMPLATES: list[dict[str, Any]] = [
    {"name": "Customer Profile", "data": CUSTOMER_PROFILE},
    {"name": "Order Processing", "data": ORDER_PROCESSING},
    {"name": "Complex Scenario", "data": COMPLEX_SCENARIO},
]

# Wire-format graph the designer opens with
STARTER_GRAPH: dict[str, Any] = {
    "nodes": [
        {
            "id": "sample-rule",
            "type": "rule",
            "data": {
                "label": "Sample Rule",
                "name": "Customer Age Validation",
                "description": "Validates customer age for eligibility",
                "priority": 1,
            },
        },
        {
            "id": "sample-condition",
            "type": "condition",
            "data": {
                "label": "Age >= 18",
                "field": "customer.age",
                "operator": ">=",
                "value": "18",
            },
        },
        {
            "id": "sample-action",
            "type": "action",
            "data": {
                "label": "Set Eligible",
                "type": "setProperty",
                "target": "customer.eligible",
                "value": "true",
            },
        },
    ],
    "edges": [
        {"id": "rule-condition", "source": "sample-rule", "target": "sample-condition"},
        {"id": "rule-action", "source": "sample-rule", "target": "sample-action"},
    ],
}


def default_input() -> dict[str, Any]:
    """Fresh copy of the input used when the caller supplies none."""
    return copy.deepcopy(COMPLEX_SCENARIO)


def get_templates() -> dict[str, Any]:
    return {
        "templates": copy.deepcopy(INPUT_TEMPLATES),
        "starter_graph": copy.deepcopy(STARTER_GRAPH),
    }
