# Feedback/wizard.py
"""
Multi-step feedback form.

Four named stages share one ``Draft``. Navigation between stages is free;
only the final submit is gated, by ``is_complete(draft)``, which needs the
four required ratings to be set (1-5). After a successful submit the wizard
is terminal and can only be closed.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from errors import SehYaatriError, ValidationError


class Stage(str, Enum):
    WEBSITE = "website-experience"
    AI_CHATBOT = "ai-chatbot-experience"
    OVERALL = "overall-experience"
    CONTACT = "contact-info"


STAGES: List[Stage] = [Stage.WEBSITE, Stage.AI_CHATBOT, Stage.OVERALL, Stage.CONTACT]

REQUIRED_RATINGS = ("website_rating", "ai_rating", "overall_experience", "recommendation")

RATING_FIELDS = {
    Stage.WEBSITE: ["website_rating", "website_ease_of_use", "website_design",
                    "website_content", "website_navigation"],
    Stage.AI_CHATBOT: ["ai_rating", "ai_accuracy", "ai_response_time",
                       "ai_helpfulness", "ai_language_support"],
    Stage.OVERALL: ["overall_experience", "recommendation"],
    Stage.CONTACT: [],
}
ISSUE_FIELDS = {Stage.WEBSITE: "website_issues", Stage.AI_CHATBOT: "ai_issues"}
TEXT_FIELDS = {
    Stage.WEBSITE: "website_comments",
    Stage.AI_CHATBOT: "ai_comments",
    Stage.OVERALL: "additional_comments",
    Stage.CONTACT: "contact_email",
}

LABELS: Dict[str, Dict[str, Any]] = {
    "en": {
        Stage.WEBSITE: "Website Experience",
        Stage.AI_CHATBOT: "AI Chatbot Experience",
        Stage.OVERALL: "Overall Experience",
        Stage.CONTACT: "Contact Information",
        "website_rating": "Rating",
        "website_ease_of_use": "Ease of Use",
        "website_design": "Design & Visual Appeal",
        "website_content": "Content Quality",
        "website_navigation": "Navigation",
        "ai_rating": "Rating",
        "ai_accuracy": "Response Accuracy",
        "ai_response_time": "Response Time",
        "ai_helpfulness": "Helpfulness",
        "ai_language_support": "Language Support",
        "overall_experience": "Overall Experience",
        "recommendation": "Would you recommend us?",
        "comments": "Additional Comments",
        "contact_email": "Email (Optional)",
        "website_issues": [
            "Slow loading times",
            "Difficult navigation",
            "Poor mobile experience",
            "Missing information",
            "Broken links",
            "Other",
        ],
        "ai_issues": [
            "Inaccurate responses",
            "Slow responses",
            "Language issues",
            "Limited knowledge",
            "Technical errors",
            "Other",
        ],
        "thank_you": "Your feedback has been submitted successfully. "
                     "We appreciate your time and will use your input to improve SehYaatri.",
    },
    "hi": {
        Stage.WEBSITE: "वेबसाइट अनुभव",
        Stage.AI_CHATBOT: "AI चैटबॉट अनुभव",
        Stage.OVERALL: "समग्र अनुभव",
        Stage.CONTACT: "संपर्क जानकारी",
        "website_rating": "रेटिंग",
        "website_ease_of_use": "उपयोग में आसानी",
        "website_design": "डिज़ाइन और दृश्य अपील",
        "website_content": "सामग्री की गुणवत्ता",
        "website_navigation": "नेविगेशन",
        "ai_rating": "रेटिंग",
        "ai_accuracy": "प्रतिक्रिया की सटीकता",
        "ai_response_time": "प्रतिक्रिया समय",
        "ai_helpfulness": "उपयोगिता",
        "ai_language_support": "भाषा सहायता",
        "overall_experience": "समग्र अनुभव",
        "recommendation": "क्या आप हमारी सिफारिश करेंगे?",
        "comments": "अतिरिक्त टिप्पणियां",
        "contact_email": "ईमेल (वैकल्पिक)",
        "website_issues": [
            "धीमी लोडिंग गति",
            "कठिन नेविगेशन",
            "खराब मोबाइल अनुभव",
            "गुम जानकारी",
            "टूटे हुए लिंक",
            "अन्य",
        ],
        "ai_issues": [
            "गलत प्रतिक्रियाएं",
            "धीमी प्रतिक्रियाएं",
            "भाषा की समस्याएं",
            "सीमित ज्ञान",
            "तकनीकी त्रुटियां",
            "अन्य",
        ],
        "thank_you": "आपकी प्रतिक्रिया सफलतापूर्वक भेज दी गई है। हम आपके समय की सराहना करते हैं "
                     "और SehYaatri को बेहतर बनाने के लिए आपके इनपुट का उपयोग करेंगे।",
    },
}


@dataclass
class Draft:
    website_rating: int = 0
    website_ease_of_use: int = 0
    website_design: int = 0
    website_content: int = 0
    website_navigation: int = 0
    website_issues: List[str] = field(default_factory=list)
    website_comments: str = ""

    ai_rating: int = 0
    ai_accuracy: int = 0
    ai_response_time: int = 0
    ai_helpfulness: int = 0
    ai_language_support: int = 0
    ai_issues: List[str] = field(default_factory=list)
    ai_comments: str = ""

    overall_experience: int = 0
    recommendation: int = 0
    additional_comments: str = ""
    contact_email: str = ""

    def to_payload(self) -> Dict[str, Any]:
        """camelCase document as sent to the server."""
        return {_camel(name): (list(value) if isinstance(value, list) else value)
                for name, value in vars(self).items()}


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def is_complete(draft: Draft) -> bool:
    return all(getattr(draft, name) >= 1 for name in REQUIRED_RATINGS)


class FeedbackWizard:
    def __init__(self, language: str = "en"):
        if language not in LABELS:
            raise ValidationError(f"Unsupported language: {language}")
        self.language = language
        self.draft = Draft()
        self.index = 0
        self.submitting = False
        self.submitted = False
        self.closed = False
        self.error: Optional[str] = None

    # -- state -------------------------------------------------------------
    @property
    def stage(self) -> Stage:
        return STAGES[self.index]

    @property
    def step(self) -> int:
        return self.index + 1

    @property
    def total_steps(self) -> int:
        return len(STAGES)

    @property
    def on_last_stage(self) -> bool:
        return self.index == len(STAGES) - 1

    @property
    def can_submit(self) -> bool:
        return (self.on_last_stage and not self.submitting and not self.submitted
                and is_complete(self.draft))

    def labels(self) -> Dict[str, Any]:
        return LABELS[self.language]

    def _ensure_open(self) -> None:
        if self.submitted or self.closed:
            raise ValidationError("Feedback form is closed")

    # -- navigation --------------------------------------------------------
    def next(self) -> Stage:
        self._ensure_open()
        self.index = min(self.index + 1, len(STAGES) - 1)
        return self.stage

    def back(self) -> Stage:
        self._ensure_open()
        self.index = max(self.index - 1, 0)
        return self.stage

    def close(self) -> None:
        self.closed = True

    # -- editing -----------------------------------------------------------
    def set_rating(self, name: str, value: int) -> None:
        self._ensure_open()
        if not any(name in names for names in RATING_FIELDS.values()):
            raise ValidationError(f"Unknown rating: {name}")
        if not isinstance(value, int) or not 1 <= value <= 5:
            raise ValidationError("Rating must be between 1 and 5")
        setattr(self.draft, name, value)

    def toggle_issue(self, name: str, issue: str) -> None:
        self._ensure_open()
        if name not in ISSUE_FIELDS.values():
            raise ValidationError(f"Unknown issue list: {name}")
        selected = getattr(self.draft, name)
        if issue in selected:
            selected.remove(issue)
        else:
            selected.append(issue)

    def set_text(self, name: str, value: str) -> None:
        self._ensure_open()
        if name not in TEXT_FIELDS.values():
            raise ValidationError(f"Unknown text field: {name}")
        setattr(self.draft, name, value)

    # -- submit ------------------------------------------------------------
    def submit(self, send: Callable[[Dict[str, Any], Optional[str]], Any]) -> bool:
        """
        Hand the whole draft to ``send(payload, email)``.

        Returns True once submitted. When ``send`` raises a
        ``SehYaatriError`` (the client raises ``ApiError``), its message is
        kept in ``self.error`` and the wizard stays on the contact stage.
        """
        if not self.can_submit:
            return False

        self.error = None
        self.submitting = True
        try:
            send(self.draft.to_payload(), self.draft.contact_email.strip() or None)
        except SehYaatriError as e:
            self.error = e.message
            return False
        finally:
            self.submitting = False
        self.submitted = True
        return True
