"""JSON output mode utilities."""

import json
from typing import Any

from rich.console import Console

from src.keyset import JWK, JWKSet


class CLIJSONEncoder(json.JSONEncoder):
    """JSON encoder that handles key records and key sets."""

    def default(self, obj: Any) -> Any:
        if isinstance(obj, (JWK, JWKSet)):
            return obj.to_dict()
        return super().default(obj)


def json_output(console: Console, data: Any) -> None:
    """Output data as formatted JSON."""
    console.print_json(json.dumps(data, cls=CLIJSONEncoder))
