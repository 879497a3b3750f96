"""BannerCraft service - strategy generation, asset analysis and director chat."""

from dataclasses import asdict

from ..clients.gemini import GeminiClient
from ..config import ANALYZER_THINKING_BUDGET, BANNER_THINKING_BUDGET
from ..errors import EmptyResponseError
from ..models.banner import BannerRequest, BannerSpec
from ..models.media import MediaPayload
from ..utils import load_prompt
from .chat import ChatSession

DEFAULT_ANALYSIS_PROMPT = "Identify the key products and the emotional tone of this image."
DIRECTOR_GREETING = (
    "Hello! I'm BannerCraft AI. Need help refining your ad strategy or brainstorming ideas? "
    "Ask me anything!"
)
DIRECTOR_EMPTY_REPLY = "I'm speechless (literally). Try again?"
NO_ANALYSIS = "No analysis generated."


class BannerService:
    """Generate banner specs and talk to the creative director persona."""

    def __init__(self, gemini: GeminiClient):
        self.gemini = gemini

    def generate_strategy(self, request: BannerRequest) -> BannerSpec:
        """Generate a schema-validated banner specification for a form request."""
        prompt = load_prompt("banner_strategy").format(**asdict(request))

        print(f"Generating banner strategy for {request.brand_name} / {request.product_name}...", flush=True)
        spec = self.gemini.generate_structured(
            prompt,
            BannerSpec,
            thinking_budget=BANNER_THINKING_BUDGET,
        )
        print(f"  Headline: {spec.headline}", flush=True)
        return spec

    def analyze_image(self, media: MediaPayload, prompt_text: str = DEFAULT_ANALYSIS_PROMPT) -> str:
        """Free-text advice on using an uploaded asset in a campaign."""
        instruction = load_prompt("banner_image_analysis").format(prompt_text=prompt_text)
        contents = [GeminiClient.image_part(media), instruction]

        print(f"Analyzing {media.mime_type} asset...", flush=True)
        try:
            return self.gemini.generate_text(contents, thinking_budget=ANALYZER_THINKING_BUDGET)
        except EmptyResponseError:
            return NO_ANALYSIS

    def new_chat(self) -> ChatSession:
        """Start a creative-director chat with the fixed persona and greeting."""
        session = ChatSession(
            self.gemini,
            system_instruction=load_prompt("banner_director"),
            greeting=DIRECTOR_GREETING,
            replay_greeting=True,
            empty_reply=DIRECTOR_EMPTY_REPLY,
        )
        return session.start()
