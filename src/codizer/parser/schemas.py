"""Field schemas for the supported tag shapes."""

from codizer.parser.base import FieldKind, FieldSchema, FieldSpec

# //codizer(title='...', description='...', developed_by='...')
FUNCTION_SCHEMA = FieldSchema(
    name="function",
    fields=(
        FieldSpec(key="title"),
        FieldSpec(key="description"),
        FieldSpec(key="developed_by"),
    ),
)

PARAMETER_SCHEMA = FieldSchema(
    name="parameter",
    fields=(
        FieldSpec(key="name"),
        FieldSpec(key="location", required=False),
        FieldSpec(key="required", kind=FieldKind.BOOL, required=False),
        FieldSpec(key="type", required=False),
        FieldSpec(key="description", required=False),
    ),
)

RESPONSE_SCHEMA = FieldSchema(
    name="response",
    fields=(
        FieldSpec(key="code"),
        FieldSpec(key="description", required=False),
        FieldSpec(key="schema", required=False),
    ),
)

# //promizer(path='...', url='...', type='...', format='...', description='...',
#            parameters=[{...}], responses=[{...}], tags=[...], security=[...],
#            consumes=[...], produces=[...], deprecated='true', body=[...])
ENDPOINT_SCHEMA = FieldSchema(
    name="endpoint",
    fields=(
        FieldSpec(key="path"),
        FieldSpec(key="url"),
        FieldSpec(key="type"),
        FieldSpec(key="format"),
        FieldSpec(key="description"),
        FieldSpec(key="parameters", kind=FieldKind.OBJECT_ARRAY, required=False, sub_schema=PARAMETER_SCHEMA),
        FieldSpec(key="responses", kind=FieldKind.OBJECT_ARRAY, required=False, sub_schema=RESPONSE_SCHEMA),
        FieldSpec(key="tags", kind=FieldKind.STRING_ARRAY, required=False),
        FieldSpec(key="security", kind=FieldKind.STRING_ARRAY, required=False),
        FieldSpec(key="consumes", kind=FieldKind.STRING_ARRAY, required=False),
        FieldSpec(key="produces", kind=FieldKind.STRING_ARRAY, required=False),
        FieldSpec(key="deprecated", kind=FieldKind.BOOL, required=False),
        FieldSpec(key="body", kind=FieldKind.RAW, required=False),
    ),
)

# //promizer(type='GET', format='json', body=['id:number'])
ENDPOINT_SUMMARY_SCHEMA = FieldSchema(
    name="endpoint summary",
    fields=(
        FieldSpec(key="type"),
        FieldSpec(key="format"),
        FieldSpec(key="body", kind=FieldKind.RAW, required=False),
    ),
)
