from inspect import getfile, getsourcelines
from os.path import basename
import re
from time import time
from typing import Any, Callable

from src.platform.logging.loguru_io_config import (
    MASK,
    SENSITIVE_KEYWORDS,
    call_depth_var,
    chain_start_time_var,
)


MAX_CONTENT_LENGTH = 1000

# Matches key=value / key: value / "key": "value" pairs for sensitive keys inside reprs
_SENSITIVE_PATTERN = re.compile(
    r"""(['"]?(?:%s)['"]?\s*[=:]\s*)(['"]?)[^,'"\s)}]+\2"""
    % '|'.join(sorted(SENSITIVE_KEYWORDS)),
    re.IGNORECASE,
)
_BEARER_PATTERN = re.compile(r'(Bearer\s+)[A-Za-z0-9\-_.]+')


def get_chain_start_time() -> float:
    if not (start_time := chain_start_time_var.get()):
        start_time = time()
        chain_start_time_var.set(start_time)
    return start_time


def enter_call() -> None:
    call_depth_var.set(call_depth_var.get() + 1)


def reset_call_depth() -> None:
    layer = max(call_depth_var.get() - 1, 0)
    call_depth_var.set(layer)
    if not layer:
        chain_start_time_var.set(0)


def build_call_target_func_path(func: Callable[..., Any]) -> str:
    target = getattr(func, '__func__', func)
    try:
        lineno = getsourcelines(target)[1]
    except (OSError, TypeError):
        lineno = 0
    return f'{basename(getfile(target))}::{func.__qualname__}:{lineno}'


def mask_sensitive(data: Any) -> Any:
    if isinstance(data, (int, float, bool)) or data is None:
        return data
    text = str(data)
    masked = _BEARER_PATTERN.sub(rf'\1{MASK}', text)
    masked = _SENSITIVE_PATTERN.sub(
        lambda m: f'{m.group(1)}{m.group(2)}{MASK}{m.group(2)}', masked
    )
    return data if masked == text else masked


def should_mask_keyword(keyword: Any, value: Any) -> Any:
    if isinstance(keyword, str) and keyword.lower() in SENSITIVE_KEYWORDS:
        return MASK
    return value


def truncate_content(data: Any, *, max_length: int = MAX_CONTENT_LENGTH) -> Any:
    if isinstance(data, str) and len(data) > max_length:
        return f'{data[:max_length]}...(truncated {len(data) - max_length} chars)'
    return data
