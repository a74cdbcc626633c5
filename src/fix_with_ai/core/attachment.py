"""Attaching the "Fix with AI" prompt to a failed test's report."""

from __future__ import annotations

from fix_with_ai.config.schema import DEFAULT_ATTACHMENT_NAME, FixWithAIConfig
from fix_with_ai.core.prompt_builder import PromptBuilder
from fix_with_ai.interfaces.page import Page
from fix_with_ai.interfaces.report import TestInfo
from fix_with_ai.utils.logging import get_logger

log = get_logger(__name__)

SNAPSHOT_SELECTOR = "html"


def will_be_retried(test_info: TestInfo) -> bool:
    """Check if the test runner will run this failed test again."""
    return test_info.retry < test_info.project.retries


async def attach_fix_with_ai(
    page: Page,
    test_info: TestInfo,
    builder: PromptBuilder | None = None,
    config: FixWithAIConfig | None = None,
) -> str | None:
    """Attach a "Fix with AI" prompt to the report of a failed test.

    Only the final failure is handled: nothing happens when the test passed
    or will be retried. The attachment is skipped when no prompt can be
    built. Errors from the page or the report are not caught.

    Args:
        page: Page the test ran on, used for the ARIA snapshot
        test_info: Information about the current test
        builder: Prompt builder (default: built from config)
        config: Configuration (default: FixWithAIConfig() from the environment)

    Returns:
        The attached prompt, or None if nothing was attached
    """
    error = test_info.error
    if error is None or will_be_retried(test_info):
        log.debug(
            "fix_with_ai_skipped",
            title=test_info.title,
            reason="passed" if error is None else "will_be_retried",
        )
        return None

    if config is None:
        config = FixWithAIConfig()
    if builder is None:
        builder = PromptBuilder.from_config(config)

    aria_snapshot = await page.locator(SNAPSHOT_SELECTOR).aria_snapshot()
    prompt = builder.build(title=test_info.title, error=error, aria_snapshot=aria_snapshot)

    if not prompt:
        log.debug("fix_with_ai_skipped", title=test_info.title, reason="prompt_not_buildable")
        return None

    await test_info.attach(config.attachment_name, body=prompt)
    log.info("fix_with_ai_attached", title=test_info.title, prompt_length=len(prompt))
    return prompt
