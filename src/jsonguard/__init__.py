"""jsonguard - recursive draft-4 JSON Schema validation.

This package checks decoded JSON values against JSON Schema documents and
reports every violation with a JSON Pointer to the offending value:

- All keywords are evaluated and all errors collected, never just the first
- Sub-schemas and nested data are validated by child validators
- A depth guard stops runaway recursion through self-referencing schemas

## Key Components

### Core
- `Validator`: Validation engine for one value/schema pair
- `evaluate`, `passes`, `fails`: Convenience functions over `Validator`
- `ValidationOptions`: `max_depth` and `bigint_mode`

### Results and failures
- `ValidationError`: Record of one failed constraint
- `ErrorKind`: Codes for the failed constraint
- `JsonGuardError` and subclasses: Structural failures that abort validation

### References
- `resolve_references`: Turns `$ref` nodes of a document into `Reference` objects

## Quick Examples

```python
from jsonguard import evaluate, passes

schema = {
    "type": "object",
    "properties": {"age": {"type": "integer", "minimum": 0}},
    "required": ["name"],
}

passes({"name": "Ada", "age": 36}, schema)  # True

for error in evaluate({"age": -1}, schema):
    print(error.pointer, error.kind.value, error.message)
# /age range_violation Number must be at least 0.
#  missing_required Required properties missing: name
```

### References
```python
from jsonguard import evaluate, resolve_references

tree = resolve_references({
    "type": "object",
    "properties": {"children": {"type": "array", "items": {"$ref": "#"}}},
})
evaluate({"children": [{"children": []}]}, tree)  # []
```
"""

from .core import Validator, evaluate, fails, passes
from .errors import ErrorKind, ValidationError
from .exceptions import (
    InvalidOptionError,
    InvalidSchemaError,
    JsonGuardError,
    MaximumDepthExceededError,
    ReferenceResolutionError,
)
from .models import BigintMode, ValidationOptions
from .pointer import Pointer
from .references import Reference, resolve_references

__all__ = [
    # Core
    "Validator",
    "evaluate",
    "passes",
    "fails",
    "ValidationOptions",
    "BigintMode",
    # Results
    "ValidationError",
    "ErrorKind",
    "Pointer",
    # References
    "Reference",
    "resolve_references",
    # Structural failures
    "JsonGuardError",
    "InvalidSchemaError",
    "InvalidOptionError",
    "MaximumDepthExceededError",
    "ReferenceResolutionError",
]

__version__ = "0.1.0"
