"""Client implementation generation.

Every operation becomes one exported async function around ``fetch``:
``get`` operations send the request as a query string, all other methods
send it as a JSON body. A non-ok response throws with the raw body text.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from ..ir import OperationIR, require_success_responses
from ..naming import capitalize, is_identifier, js_string
from .emitter import INDENT
from .profile import GenerationProfile
from .types import NO_CONTENT_STATUS

_PLACEHOLDER_RE = re.compile(r"\{([^{}]+)\}")


@dataclass
class ClientOutput:
    code: str


def generate_client(
    operations: list[OperationIR],
    name: str,
    url: str,
    profile: GenerationProfile,
) -> ClientOutput:
    """Generate the client implementation for ``operations``.

    Args:
        operations: Operations in document order
        name: Base name; ``<Name>`` is the interface from the types document
        url: Base URL written verbatim into the generated module
        profile: Selects TypeScript bindings or JSDoc annotated JavaScript

    Raises:
        NoSuccessResponseError: If any operation lacks a 2xx response
    """
    require_success_responses(operations)
    api_name = capitalize(name)
    lines: list[str] = []
    if profile.typed_bindings:
        lines.append(f"import type {{ {api_name} }} from {js_string(f'./{name}-types')}")
        lines.append("")
    lines.append(f"const url = {js_string(url)}")
    lines.append("")

    for operation in operations:
        lines.extend(_emit_binding(operation, name, api_name, profile))
        lines.extend(_emit_fetch(operation))
        lines.append("")
        lines.append(f"{INDENT}if (!response.ok) {{")
        lines.append(f"{INDENT * 2}throw new Error(await response.text())")
        lines.append(f"{INDENT}}}")
        lines.append("")
        if NO_CONTENT_STATUS in operation.success_statuses:
            lines.append(f"{INDENT}if (response.status === {NO_CONTENT_STATUS}) {{")
            lines.append(f"{INDENT * 2}return undefined")
            lines.append(f"{INDENT}}}")
            lines.append("")
        lines.append(f"{INDENT}return await response.json()")
        lines.append("}")
        lines.append("")

    return ClientOutput(code="\n".join(lines).rstrip() + "\n")


def path_template(path: str) -> str:
    """Turn an OpenAPI path into the body of a JS template literal.

    Example:
        >>> path_template("/organizations/{orgId}/members/{memberId}")
        '/organizations/${request.orgId}/members/${request.memberId}'
    """

    def _access(match: re.Match[str]) -> str:
        param = match.group(1)
        if is_identifier(param):
            return f"${{request.{param}}}"
        return f"${{request[{js_string(param)}]}}"

    escaped = path.replace("\\", "\\\\").replace("`", "\\`")
    return _PLACEHOLDER_RE.sub(_access, escaped)


def _emit_binding(
    operation: OperationIR,
    name: str,
    api_name: str,
    profile: GenerationProfile,
) -> list[str]:
    operation_id = operation.operation_id
    if profile.typed_bindings:
        return [f"export const {operation_id}: {api_name}['{operation_id}'] = async (request) => {{"]
    # JSDoc gives editors the same signature the .d.ts declares
    return [
        f"/** @type {{import('./{name}-types.d.ts').{api_name}['{operation_id}']}} */",
        f"export const {operation_id} = async (request) => {{",
    ]


def _emit_fetch(operation: OperationIR) -> list[str]:
    target = f"${{url}}{path_template(operation.path)}"
    if operation.method == "get":
        query = "${new URLSearchParams(Object.entries(request)).toString()}"
        return [f"{INDENT}const response = await fetch(`{target}?{query}`)"]
    return [
        f"{INDENT}const response = await fetch(`{target}`, {{",
        f"{INDENT * 2}method: {js_string(operation.method.upper())},",
        f"{INDENT * 2}body: JSON.stringify(request),",
        f"{INDENT * 2}headers: {{",
        f"{INDENT * 3}'Content-Type': 'application/json'",
        f"{INDENT * 2}}}",
        f"{INDENT}}})",
    ]
