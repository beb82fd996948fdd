from dataclasses import dataclass
from typing import Union

Number = Union[int, float]


@dataclass
class Rectangle:
    width: Number
    height: Number

    def get_area(self) -> Number:
        return self.width * self.height
