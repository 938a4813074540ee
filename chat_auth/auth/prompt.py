"""Sign-in prompt shown when no chat token is available."""

import logging
from enum import Enum
from typing import Callable, List, Optional

from chat_auth.config import constants
from chat_auth.interfaces import UserInteraction

logger = logging.getLogger("chat_auth.prompt")


class AuthPromptOutcome(Enum):
    """What the user chose in the sign-in prompt."""
    SIGN_IN_REQUESTED = "sign_in_requested"
    ISSUE_FILED = "issue_filed"
    DISMISSED = "dismissed"


class AuthPrompt:
    """
    Maps the user's answer to the "token not found" notification to an action.

    The notification always offers sign-in. When the client was installed
    as part of an extension pack the user may not use Slack at all, so a
    second option lets them request support for their provider instead.
    """

    def __init__(
        self,
        ui: UserInteraction,
        sign_in: Callable[[str], None],
        offer_unsupported: bool = False
    ):
        """
        Initialize the prompt.

        Args:
            ui: Host UI used to show the notification and file issues
            sign_in: Starts the sign-in flow; receives the event source
            offer_unsupported: Whether to offer the "I don't use Slack" option
        """
        self._ui = ui
        self._sign_in = sign_in
        self._offer_unsupported = offer_unsupported

    @property
    def options(self) -> List[str]:
        """Action buttons shown with the notification."""
        items = [constants.SIGN_IN_SLACK]
        if self._offer_unsupported:
            items.append(constants.DONT_HAVE_SLACK)
        return items

    def prompt_for_auth(self) -> AuthPromptOutcome:
        """
        Ask the user how to proceed without a token.

        Returns:
            The outcome of the user's choice
        """
        selected = self._ui.prompt_choice(constants.TOKEN_NOT_FOUND, self.options)

        if selected == constants.SIGN_IN_SLACK:
            logger.info("User chose to sign in")
            self._sign_in(constants.SOURCE_INFO)
            return AuthPromptOutcome.SIGN_IN_REQUESTED

        if selected == constants.DONT_HAVE_SLACK and self._offer_unsupported:
            return self._report_unsupported_provider()

        logger.debug("Sign-in prompt dismissed")
        return AuthPromptOutcome.DISMISSED

    def _report_unsupported_provider(self) -> AuthPromptOutcome:
        provider: Optional[str] = self._ui.prompt_free_text(
            constants.PROVIDER_PROMPT,
            constants.PROVIDER_PLACEHOLDER
        )
        if not provider:
            return AuthPromptOutcome.DISMISSED

        title = constants.NEW_PROVIDER_ISSUE_TITLE.format(provider=provider)
        body = constants.NEW_PROVIDER_ISSUE_BODY.format(provider=provider)
        self._ui.file_issue(title, body)
        logger.info("Opened issue requesting a new chat provider")
        return AuthPromptOutcome.ISSUE_FILED
