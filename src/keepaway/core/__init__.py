"""
Core package aggregator for keepaway contracts (grammar, schema, errors, constants).

## Contracts (single source of truth)
- Grammar — Operator enum and ``old <op> <operand>`` expression helpers.
- Schema — frozen pydantic models (Transform, AgentSpec) and roster preconditions.
- Errors — GrammarError, SpecError.
- Constants — canonical round counts, relief divisor and the ModulusStrategy literal.

## Notes
- Zero-IO policy: stdlib + pydantic only; no file/network IO.
- Routing addresses agents by roster position (AgentSpec.id).

## Downstream usage
- keepaway.world — builds AgentState from AgentSpec and drives rounds.
- keepaway.io — parser emits AgentSpec; config defaults come from constants.
- keepaway.lab — CLI surfaces SpecError as a diagnostic.

## Examples
```python
from keepaway.core.schema import AgentSpec, validate_roster
spec = AgentSpec(
    id=0,
    transform={"operator": "*", "operand": 19},
    divisor=23,
    true_target=0,
    false_target=0,
    initial_items=[79, 98],
)
validate_roster([spec])
```
"""
