import json
from dataclasses import asdict, is_dataclass
from typing import Any, Type, TypeVar

from utils import get_logger

T = TypeVar("T")

logger = get_logger("json_helpers")


def _to_serializable(obj: Any) -> Any:
    """Fallback for values json cannot encode on its own"""
    if is_dataclass(obj) and not isinstance(obj, type):
        return asdict(obj)
    if hasattr(obj, "__dict__"):
        return vars(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def get_json(obj: Any) -> str:
    """
    Input: obj - list, dict, scalar, dataclass instance or plain object
    Functionality: Serialize obj to compact JSON text
    Output: str, e.g. [1, 2, 3] => '[1,2,3]'
    """
    return json.dumps(obj, separators=(",", ":"), default=_to_serializable)


def from_json(target_type: Type[T], json_text: str) -> T:
    """
    Input: target_type - class to build, json_text (str)
    Functionality: Parse json_text into plain data, then construct target_type
                   through from_dict() when it defines one, else its constructor
    Output: instance of target_type

        r = from_json(Rectangle, '{"width":10,"height":20}')
        r.get_area()  # => 200
    """
    data = json.loads(json_text)

    from_dict = getattr(target_type, "from_dict", None)
    if callable(from_dict):
        return from_dict(data)

    if not isinstance(data, dict):
        raise TypeError(
            f"Cannot build {target_type.__name__} from JSON {type(data).__name__}, expected an object"
        )

    logger.debug(f"Building {target_type.__name__} from fields {list(data.keys())}")
    return target_type(**data)
