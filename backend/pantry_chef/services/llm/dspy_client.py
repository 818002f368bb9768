import time
from typing import Any

import dspy

from pantry_chef.config import settings
from pantry_chef.logging import get_logger
from pantry_chef.storage.db import get_session
from pantry_chef.storage.repositories import log_llm_call
from pantry_chef.utils.timing import _format_duration

logger = get_logger(__name__)


def _make_lm(model: str) -> dspy.LM:
    return dspy.LM(
        f"{settings.llm_provider}/{model}",
        api_key=settings.llm_api_key or None,
        temperature=settings.llm_temperature,
        max_tokens=settings.llm_max_tokens,
        timeout=settings.llm_timeout_s,
        num_retries=0,  # single attempt; callers report failures to the user
    )


def configure_dspy() -> None:
    lm = _make_lm(settings.llm_model)
    dspy.settings.configure(lm=lm)
    logger.info("llm.configure provider=%s model=%s", settings.llm_provider, settings.llm_model)


def run_with_logging(
    prompt_name: str,
    prompt_version: str,
    fn: Any,
    **kwargs: Any,
) -> Any:
    """Run an LLM-backed callable, timing it and recording the call in the LLM log."""
    start = time.time()
    logger.info(
        "[TIMING] llm.call.start name=%s version=%s model=%s",
        prompt_name,
        prompt_version,
        settings.llm_model,
    )
    result = fn(**kwargs)
    latency_ms = int((time.time() - start) * 1000)
    with get_session() as session:
        log_llm_call(
            session=session,
            prompt_name=prompt_name,
            prompt_version=prompt_version,
            model=settings.llm_model,
            input_payload=str(kwargs),
            output_payload=str(result),
            latency_ms=latency_ms,
        )
    _log_last_prompt(prompt_name)
    logger.info(
        "[TIMING] llm.call.end name=%s latency_ms=%s (%s)",
        prompt_name,
        latency_ms,
        _format_duration(latency_ms),
    )
    return result


def _log_last_prompt(prompt_name: str) -> None:
    try:
        lm = dspy.settings.lm
        history = getattr(lm, "history", None)
        if isinstance(history, list) and history:
            logger.debug("llm.prompt name=%s content=%s", prompt_name, history[-1].get("messages"))
        else:
            logger.debug("llm.prompt.empty name=%s", prompt_name)
    except Exception as exc:  # noqa: BLE001 - avoid breaking runtime on inspection
        logger.warning("llm.prompt.inspect_failed name=%s error=%s", prompt_name, exc)
