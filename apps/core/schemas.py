from ninja import Schema
from pydantic import ConfigDict
from pydantic.alias_generators import to_camel


class CamelSchema(Schema):
    """Input schema accepting camelCase keys (`employeeId`, `dueDate`) from the frontend."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
