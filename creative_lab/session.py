"""
Campaign session - all UI state for one browser session and the five
user actions that drive the provider clients.

The session is framework-independent: app.py keeps one instance in
st.session_state and renders from it. Every action catches provider
failures, records a toast, and leaves unrelated assets untouched.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from .config import (
    STARTING_CREDITS,
    UPGRADED_CREDITS,
    Action,
    ActionState,
    CreativeAssets,
    LoadingState,
    ProductAnalysis,
)
from .copywriter import ideate_broll, write_viral_script
from .errors import is_expired_credential
from .lifestyle_image import generate_lifestyle_image
from .product_analyst import analyze_product_image
from .utils import fetch_sample_image, get_logger
from .video_director import generate_product_video

logger = get_logger("session")

DEFAULT_VIDEO_STATUS = "Initializing..."


@dataclass
class CampaignServices:
    """Provider entry points used by the session; swapped out in tests."""
    analyze: Callable = analyze_product_image
    generate_image: Callable = generate_lifestyle_image
    generate_video: Callable = generate_product_video
    write_script: Callable = write_viral_script
    ideate_broll: Callable = ideate_broll
    fetch_sample: Callable = fetch_sample_image


class CampaignSession:
    def __init__(self, services: Optional[CampaignServices] = None, credits: int = STARTING_CREDITS):
        self.services = services or CampaignServices()
        self.credits = credits
        self.paid_api_key: Optional[str] = None
        self.show_upgrade_modal = False
        self.toast: Optional[str] = None
        self.new_campaign()

    # ---------- Derived state ----------
    @property
    def has_pro(self) -> bool:
        return bool(self.paid_api_key)

    @property
    def original_image(self) -> Optional[str]:
        return self.assets.original_image

    @property
    def loading(self) -> LoadingState:
        return LoadingState(**{
            action.value: state is ActionState.IN_FLIGHT
            for action, state in self.action_states.items()
        })

    def state_of(self, action: Action) -> ActionState:
        return self.action_states[action]

    # ---------- Notifications / modal ----------
    def show_toast(self, msg: str) -> None:
        self.toast = msg

    def dismiss_toast(self) -> None:
        self.toast = None

    def open_upgrade_modal(self) -> None:
        self.show_upgrade_modal = True

    def close_upgrade_modal(self) -> None:
        self.show_upgrade_modal = False

    # ---------- Lifecycle ----------
    def new_campaign(self) -> None:
        """Discard the current campaign. Credits and the linked key are kept."""
        self.analysis: Optional[ProductAnalysis] = None
        self.assets = CreativeAssets()
        self.video_status = DEFAULT_VIDEO_STATUS
        self.action_states: Dict[Action, ActionState] = {a: ActionState.IDLE for a in Action}

    def upgrade(self, api_key: str) -> bool:
        """Link a paid API key, unlocking video generation and resetting credits."""
        key = (api_key or "").strip()
        if not key:
            self.show_toast("Enter a paid API key to unlock Pro features.")
            return False
        self.paid_api_key = key
        self.close_upgrade_modal()
        self.credits = UPGRADED_CREDITS
        self.show_toast("Pro features unlocked!")
        logger.info("Paid API key linked")
        return True

    # ---------- Actions ----------
    def _begin(self, action: Action) -> bool:
        if self.action_states[action] is ActionState.IN_FLIGHT:
            logger.warning(f"Ignoring {action.value}: already in flight")
            return False
        self.action_states[action] = ActionState.IN_FLIGHT
        return True

    def _settle(self, action: Action, ok: bool) -> None:
        self.action_states[action] = ActionState.SUCCEEDED if ok else ActionState.FAILED

    def _has_credits(self) -> bool:
        if self.credits <= 0:
            self.open_upgrade_modal()
            return False
        return True

    def upload_image(self, image: str) -> bool:
        """Store an uploaded photo (data URL) and analyze it."""
        if not self._has_credits():
            return False
        self.assets.original_image = image
        return self.analyze(image)

    def load_sample(self) -> bool:
        """Fetch the sample product photo and analyze it. Analysis is busy for both steps."""
        if not self._has_credits():
            return False
        if not self._begin(Action.ANALYZE):
            return False
        ok = False
        try:
            try:
                image = self.services.fetch_sample()
            except Exception as exc:
                logger.error(f"Sample image fetch failed: {exc}")
                self.show_toast("Failed to load sample image.")
                return False
            self.assets.original_image = image
            ok = self._run_analysis(image)
            return ok
        finally:
            self._settle(Action.ANALYZE, ok)

    def analyze(self, image: str) -> bool:
        if not self._begin(Action.ANALYZE):
            return False
        ok = False
        try:
            ok = self._run_analysis(image)
            return ok
        finally:
            self._settle(Action.ANALYZE, ok)

    def _run_analysis(self, image: str) -> bool:
        try:
            result = self.services.analyze(image, api_key=self.paid_api_key)
        except Exception as exc:
            logger.exception(f"Analysis failed: {exc}")
            self.show_toast("Analysis failed. Try another image.")
            return False
        self.analysis = result
        self.credits = max(0, self.credits - 1)
        self.show_toast("Analysis complete! 1 credit used.")
        return True

    def generate_image(self) -> bool:
        if not self.original_image or not self.analysis:
            return False
        if not self._begin(Action.GENERATE_IMAGE):
            return False
        ok = False
        try:
            result = self.services.generate_image(
                self.original_image, self.analysis, api_key=self.paid_api_key
            )
            self.assets.lifestyle_image = result
            self.show_toast("Lifestyle photo generated!")
            ok = True
        except Exception as exc:
            logger.error(f"Lifestyle image failed: {exc}")
            self.show_toast("Failed to generate image.")
        finally:
            self._settle(Action.GENERATE_IMAGE, ok)
        return ok

    def write_script(self) -> bool:
        if not self.analysis:
            return False
        if not self._begin(Action.WRITE_SCRIPT):
            return False
        ok = False
        try:
            self.assets.tiktok_script = self.services.write_script(self.analysis, api_key=self.paid_api_key)
            self.show_toast("Viral script ready!")
            ok = True
        except Exception as exc:
            logger.error(f"Script writing failed: {exc}")
            self.show_toast("Failed to write script.")
        finally:
            self._settle(Action.WRITE_SCRIPT, ok)
        return ok

    def ideate_broll(self) -> bool:
        if not self.analysis:
            return False
        if not self._begin(Action.IDEATE_BROLL):
            return False
        ok = False
        try:
            self.assets.broll_concepts = self.services.ideate_broll(self.analysis, api_key=self.paid_api_key)
            self.show_toast("B-roll concepts created!")
            ok = True
        except Exception as exc:
            logger.error(f"B-roll ideation failed: {exc}")
            self.show_toast("Failed to ideate B-roll.")
        finally:
            self._settle(Action.IDEATE_BROLL, ok)
        return ok

    def generate_video(self, on_status: Optional[Callable[[str], None]] = None) -> bool:
        """
        Generate the hero video. Requires a linked paid key: without one the
        upgrade modal opens and the provider is never called.

        A Streamlit rerun interrupts the poll with a BaseException; the
        action still settles as FAILED so the button works again.
        """
        if not self.has_pro:
            self.open_upgrade_modal()
            return False
        if not self.original_image or not self.analysis:
            return False
        if not self._begin(Action.GENERATE_VIDEO):
            return False

        def status(msg: str) -> None:
            self.video_status = msg
            if on_status:
                on_status(msg)

        ok = False
        try:
            self.assets.product_video = self.services.generate_video(
                self.original_image,
                self.analysis,
                on_status=status,
                api_key=self.paid_api_key,
            )
            self.show_toast("Campaign video generated!")
            ok = True
        except Exception as exc:
            logger.error(f"Video generation failed: {exc}")
            if is_expired_credential(exc):
                self.show_toast("Session expired. Please re-link your key.")
                self.paid_api_key = None
                self.open_upgrade_modal()
            else:
                self.show_toast("Video generation failed.")
        finally:
            self._settle(Action.GENERATE_VIDEO, ok)
        return ok
