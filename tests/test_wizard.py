"""Feedback wizard state machine."""
import pytest

from Client.api import ApiError
from errors import ValidationError
from Feedback.wizard import LABELS, REQUIRED_RATINGS, STAGES, Draft, FeedbackWizard, Stage, is_complete


def _rate_required(wizard, value=4):
    for name in REQUIRED_RATINGS:
        wizard.set_rating(name, value)


def _to_last(wizard):
    for _ in range(len(STAGES)):
        wizard.next()


def test_stage_order():
    assert [s.value for s in STAGES] == [
        "website-experience", "ai-chatbot-experience", "overall-experience", "contact-info"]


def test_navigation_is_clamped():
    wizard = FeedbackWizard()
    assert wizard.back() is Stage.WEBSITE
    assert wizard.next() is Stage.AI_CHATBOT
    _to_last(wizard)
    assert wizard.stage is Stage.CONTACT
    assert wizard.step == wizard.total_steps == 4
    assert wizard.back() is Stage.OVERALL


def test_forward_navigation_needs_no_ratings():
    wizard = FeedbackWizard()
    _to_last(wizard)
    assert wizard.stage is Stage.CONTACT
    assert not wizard.can_submit


@pytest.mark.parametrize("missing", REQUIRED_RATINGS)
def test_is_complete_needs_every_required_rating(missing):
    draft = Draft(website_rating=5, ai_rating=5, overall_experience=5, recommendation=5)
    assert is_complete(draft)
    setattr(draft, missing, 0)
    assert not is_complete(draft)


def test_optional_fields_do_not_matter():
    draft = Draft(website_rating=1, ai_rating=1, overall_experience=1, recommendation=1)
    assert is_complete(draft)
    draft.website_design = 3
    draft.ai_issues.append("Other")
    draft.contact_email = "not-an-email"
    assert is_complete(draft)


def test_submit_gated_until_required_ratings_set():
    wizard = FeedbackWizard()
    _to_last(wizard)
    sent = []
    assert wizard.submit(lambda payload, email: sent.append(payload)) is False
    assert sent == []

    _rate_required(wizard)
    assert wizard.can_submit


def test_submit_only_from_last_stage():
    wizard = FeedbackWizard()
    _rate_required(wizard)
    assert not wizard.can_submit
    _to_last(wizard)
    assert wizard.can_submit


@pytest.mark.parametrize("value", [0, 6, -1, "5"])
def test_rating_bounds(value):
    with pytest.raises(ValidationError):
        FeedbackWizard().set_rating("website_rating", value)


def test_unknown_fields_rejected():
    wizard = FeedbackWizard()
    with pytest.raises(ValidationError):
        wizard.set_rating("speed", 3)
    with pytest.raises(ValidationError):
        wizard.toggle_issue("website_comments", "x")
    with pytest.raises(ValidationError):
        wizard.set_text("website_rating", "x")


def test_issue_toggle():
    wizard = FeedbackWizard()
    wizard.toggle_issue("website_issues", "Broken links")
    wizard.toggle_issue("website_issues", "Other")
    wizard.toggle_issue("website_issues", "Broken links")
    assert wizard.draft.website_issues == ["Other"]


def test_submit_sends_whole_draft():
    wizard = FeedbackWizard("hi")
    _rate_required(wizard, 5)
    wizard.set_rating("ai_accuracy", 2)
    wizard.toggle_issue("ai_issues", LABELS["hi"]["ai_issues"][0])
    wizard.set_text("additional_comments", "बहुत अच्छा")
    wizard.set_text("contact_email", " user@x.com ")
    _to_last(wizard)
    sent = []

    assert wizard.submit(lambda payload, email: sent.append((payload, email))) is True

    payload, email = sent[0]
    assert email == "user@x.com"
    assert payload["websiteRating"] == 5
    assert payload["aiAccuracy"] == 2
    assert payload["aiIssues"] == ["गलत प्रतिक्रियाएं"]
    assert payload["additionalComments"] == "बहुत अच्छा"
    assert payload["websiteIssues"] == []
    assert wizard.submitted and not wizard.submitting


def test_blank_contact_email_sent_as_none():
    wizard = FeedbackWizard()
    _rate_required(wizard)
    _to_last(wizard)
    sent = []
    wizard.submit(lambda payload, email: sent.append(email))
    assert sent == [None]


def test_failed_submit_keeps_stage_and_message():
    wizard = FeedbackWizard()
    _rate_required(wizard)
    _to_last(wizard)

    def failing(payload, email):
        raise ApiError("Missing payload", 400)

    assert wizard.submit(failing) is False
    assert wizard.error == "Missing payload"
    assert wizard.stage is Stage.CONTACT
    assert not wizard.submitted
    assert wizard.can_submit

    assert wizard.submit(lambda payload, email: None) is True
    assert wizard.error is None


def test_submitted_wizard_only_closes():
    wizard = FeedbackWizard()
    _rate_required(wizard)
    _to_last(wizard)
    wizard.submit(lambda payload, email: None)

    assert not wizard.can_submit
    with pytest.raises(ValidationError):
        wizard.back()
    with pytest.raises(ValidationError):
        wizard.set_rating("website_rating", 1)
    wizard.close()
    assert wizard.closed


def test_unknown_language():
    with pytest.raises(ValidationError):
        FeedbackWizard("fr")
