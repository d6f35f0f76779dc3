from inspect import Parameter, getfile, getsourcelines, signature
from os.path import basename
import re
from time import time
from typing import Any, Callable

from event_ticketing.platform.logging.loguru_io_config import (
    SENSITIVE_KEYWORDS,
    call_depth_var,
    chain_start_time_var,
)


MASK = '********'
MAX_CONTENT_LENGTH = 1000

# Matches `password='x'`, `'token': 'x'` and `"password": "x"` inside reprs
_SENSITIVE_PATTERN = re.compile(
    r'((?:%s)[\'"]?)(=|:\s*)([\'"])(.*?)\3' % '|'.join(sorted(SENSITIVE_KEYWORDS))
)


def get_chain_start_time() -> float:
    if not (start_time := chain_start_time_var.get()):
        start_time = time()
        chain_start_time_var.set(start_time)
    return start_time


def build_call_target_func_path(func: Callable[..., Any]) -> str:
    try:
        lineno = getsourcelines(func)[1]
    except (OSError, TypeError):
        lineno = 0
    return f'{basename(getfile(getattr(func, "__func__", func)))}::{func.__qualname__}:{lineno}'


def reset_call_depth() -> None:
    layer = call_depth_var.get() - 1
    call_depth_var.set(layer)
    if not layer:
        chain_start_time_var.set(0)


_NAMED_KINDS = (Parameter.POSITIONAL_OR_KEYWORD, Parameter.KEYWORD_ONLY)
_POSITIONAL_KINDS = (Parameter.POSITIONAL_ONLY, Parameter.POSITIONAL_OR_KEYWORD)


def normalize_args_kwargs(
    func: Callable[..., Any], *args: Any, **kwargs: Any
) -> tuple[tuple[Any, ...], dict[Any, Any]]:
    """Drop arguments the wrapped function would not accept."""
    params = list(signature(getattr(func, '__wrapped__', func)).parameters.values())
    kinds = {param.kind for param in params}

    if Parameter.VAR_KEYWORD not in kinds:
        accepted = {param.name for param in params if param.kind in _NAMED_KINDS}
        kwargs = {key: value for key, value in kwargs.items() if key in accepted}

    if Parameter.VAR_POSITIONAL not in kinds:
        positional = [
            param for param in params if param.kind in _POSITIONAL_KINDS and param.name not in kwargs
        ]
        args = args[: len(positional)]

    return args, kwargs


def mask_sensitive(data: Any) -> Any:
    try:
        data_str = str(data)
    except Exception:
        return data
    masked = _SENSITIVE_PATTERN.sub(rf'\1\2\3{MASK}\3', data_str)
    return data if masked == data_str else masked


def should_mask_keyword(keyword: Any, value: Any) -> Any:
    if isinstance(keyword, str) and any(word in keyword.lower() for word in SENSITIVE_KEYWORDS):
        return MASK
    return value


def truncate_content(content: Any) -> Any:
    if isinstance(content, str) and len(content) > MAX_CONTENT_LENGTH:
        return f'{content[:MAX_CONTENT_LENGTH]}... (truncated {len(content) - MAX_CONTENT_LENGTH} chars)'
    return content
