from enum import Enum
import numpy as np

class FormatType(str, Enum):
    INT = "int"
    FLOAT = "float"

max_non_hue = {
    FormatType.INT: 255,
    FormatType.FLOAT: 1.0,
}

format_classes = {
    FormatType.INT: int,
    FormatType.FLOAT: float,
}

default_format_dtypes = {
    FormatType.INT: np.uint8,
    FormatType.FLOAT: np.float64,
}

format_valid_dtypes = {
    FormatType.INT: (int, np.integer),
    FormatType.FLOAT: (int, float, np.integer, np.floating),
}
