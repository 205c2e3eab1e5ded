"""Batch dispatcher.

Purpose:
    Fan a list of prompts out to one provider concurrently and return the
    answers in input order, or a single error.

Concurrency:
    One worker thread per prompt, all submitted up front (no chunking, no
    cap). Futures are kept in submission order and every one of them is
    awaited before any outcome is inspected.

Failure policy:
    All-or-nothing. After the join, outcomes are folded in input order and
    the first failing position raises; results of the other prompts are
    discarded. In-flight siblings are never cancelled. A worker that dies with
    anything other than a :class:`CallError`, or a future that never ran,
    surfaces as ``CONCURRENCY_FAULT``.
"""

from __future__ import annotations

import concurrent.futures as cf
import logging
import uuid
from time import perf_counter
from typing import Iterable, List, Optional

import httpx

from ..base.errors import CallError, ErrorCode, classify_exception
from ..base.logging import LogContext, get_logger, log_event
from ..base.models import Provider
from .caller import call_llm

_logger = get_logger("llmblast.dispatch")


def _as_call_error(exc: BaseException, index: int, provider: Provider) -> CallError:
    if isinstance(exc, CallError):
        exc.index = index
        return exc
    code = classify_exception(exc)
    return CallError(
        code=code,
        message=f"worker for prompt {index} failed: {exc!r}",
        provider=str(getattr(provider, "kind", type(provider).__name__)),
        model=getattr(provider, "model_name", None),
        index=index,
        raw=exc,
    )


def call_llm_batch(
    prompts: Iterable[str],
    provider: Provider,
    *,
    client: Optional[httpx.Client] = None,
) -> List[str]:
    """Call the provider once per prompt, concurrently.

    Parameters:
        prompts: Ordered prompts; order is preserved in the result.
        provider: Descriptor shared read-only by every worker.
        client: Optional transport for all workers; defaults to the shared one.

    Returns:
        ``result[i]`` is the answer to ``prompts[i]``.

    Raises:
        CallError: the error of the lowest failing index, with ``index`` set.
    """
    prompts = list(prompts)
    ctx = LogContext(
        provider=str(getattr(provider, "kind", type(provider).__name__)),
        model=getattr(provider, "model_name", None),
        request_id=uuid.uuid4().hex[:12],
    )
    if not prompts:
        log_event(_logger, "batch.finish", ctx, size=0, ok=True, duration_ms=0.0)
        return []

    t0 = perf_counter()
    log_event(_logger, "batch.start", ctx, size=len(prompts))

    futures: List[cf.Future] = []
    submit_error: Optional[BaseException] = None
    with cf.ThreadPoolExecutor(max_workers=len(prompts), thread_name_prefix="llmblast") as executor:
        try:
            for prompt in prompts:
                futures.append(executor.submit(call_llm, prompt, provider, client=client))
        except RuntimeError as e:
            submit_error = e
        cf.wait(futures)

    def _finish(ok: bool, error: Optional[CallError] = None) -> None:
        log_event(
            _logger,
            "batch.finish",
            ctx,
            level=logging.INFO if ok else logging.WARNING,
            size=len(prompts),
            ok=ok,
            error_code=error.code.value if error else None,
            failed_index=error.index if error else None,
            duration_ms=round((perf_counter() - t0) * 1000.0, 1),
        )

    if submit_error is not None:
        error = CallError(
            code=ErrorCode.CONCURRENCY_FAULT,
            message=f"could only start {len(futures)} of {len(prompts)} workers: {submit_error}",
            provider=ctx.provider or "-",
            model=ctx.model,
            index=len(futures),
            raw=submit_error,
        )
        _finish(False, error)
        raise error from submit_error

    results: List[str] = []
    for index, future in enumerate(futures):
        try:
            results.append(future.result())
        except cf.CancelledError as e:
            error = CallError(
                code=ErrorCode.CONCURRENCY_FAULT,
                message=f"worker for prompt {index} was cancelled",
                provider=ctx.provider or "-",
                model=ctx.model,
                index=index,
                raw=e,
            )
            _finish(False, error)
            raise error from e
        except Exception as e:
            error = _as_call_error(e, index, provider)
            log_event(
                _logger,
                "call.error",
                ctx,
                level=logging.WARNING,
                index=index,
                error_code=error.code.value,
                status_code=error.status_code,
                message=error.message,
            )
            _finish(False, error)
            if error is e:
                raise
            raise error from e

    _finish(True)
    return results


__all__ = ["call_llm_batch"]
