"""
JSON Schema generator for the engine records.

Exports the input and output record schemas so the dashboard front end can
type-check what it sends to and receives from the calculation API.
"""

import json
from pathlib import Path
from typing import Any, Dict, Type

from pydantic import BaseModel

from .cash_flow import CashFlowMetrics, CashFlowSnapshot
from .forms import CashFlowInput, RetirementInput
from .retirement import RetirementPlan, RetirementProjection

SCHEMA_MODELS: Dict[str, Type[BaseModel]] = {
    "cash_flow_input": CashFlowInput,
    "cash_flow_snapshot": CashFlowSnapshot,
    "cash_flow_metrics": CashFlowMetrics,
    "retirement_input": RetirementInput,
    "retirement_plan": RetirementPlan,
    "retirement_projection": RetirementProjection,
}


def generate_schemas() -> Dict[str, Dict[str, Any]]:
    """Generate JSON schemas for every exported record, keyed by name."""
    return {name: model.model_json_schema() for name, model in SCHEMA_MODELS.items()}


def save_schemas(output_dir: Path) -> Dict[str, Path]:
    """Write one ``<name>.json`` schema file per record into ``output_dir``."""
    output_dir.mkdir(parents=True, exist_ok=True)
    written = {}
    for name, schema in generate_schemas().items():
        schema.update(
            {
                "$schema": "http://json-schema.org/draft-07/schema#",
                "$id": f"https://satang.app/schema/{name}.json",
            }
        )
        path = output_dir / f"{name}.json"
        with open(path, "w") as f:
            json.dump(schema, f, indent=2)
        written[name] = path
    return written


if __name__ == "__main__":
    schema_dir = Path(__file__).parent.parent.parent / "schema"
    for name, path in save_schemas(schema_dir).items():
        print(f"Schema {name} saved to {path}")
