"""Tests for per-category content and the multi-service merge."""

import pytest

from proposal_engine.core.exceptions import UnsupportedCategoryError
from proposal_engine.engine.composer import (
    COMPLETION_STEP,
    ENGAGEMENT_STEP,
    INITIAL_PAYMENT_STEP,
    MULTI_SCOPE_PREFIX,
    SINGLE_SCOPE_PREFIX,
    build_category_content,
    compose_content,
    dedupe_documents,
)
from proposal_engine.engine import builders
from proposal_engine.models import FieldRecord, ServiceCategory


class TestSingleCategory:
    """Tests for composing a single category."""

    def test_scope_prefix_and_numbering(self):
        """A single category keeps its content with numbered headings."""
        content = compose_content(["real_estate"], FieldRecord())

        assert content.scope_paragraph.startswith(SINGLE_SCOPE_PREFIX)
        assert [s.heading for s in content.sections] == [
            "2.1 Legal Due Diligence (Real Estate)",
            "2.2 Contractual Documentation (Real Estate)",
            "2.3 Notarial Transaction Assistance (Real Estate)",
            "2.4 Post-Transaction Registration (Real Estate)",
        ]

    def test_empty_selection_uses_residency(self):
        """No services composes the residency-permit content."""
        empty = compose_content([], FieldRecord())
        residency = compose_content(["residency_permit"], FieldRecord())

        assert empty == residency

    def test_only_pensioner_has_process_steps(self):
        """Process steps exist for the pensioner category only."""
        assert compose_content(["residency_pensioner"], FieldRecord()).has_process_steps
        assert compose_content(["visa_d"], FieldRecord()).process_steps is None

    def test_pensioner_dependent_adds_step_two(self):
        """A dependent adds the family reunification step."""
        fields = FieldRecord(dependent_name="Jane Smith")
        content = compose_content(["residency_pensioner"], fields)

        assert len(content.process_steps) == 2
        assert content.process_steps[1].step.startswith("STEP 2")

    def test_field_interpolation(self):
        """Intake answers flow into the generated narrative."""
        fields = FieldRecord(number_of_applicants=3, purpose_of_stay="employment", nationality="Indian")
        content = compose_content(["visa_d"], fields)

        assert "for 3 applicant(s)" in content.scope_paragraph
        assert "for the purpose of employment" in content.scope_paragraph
        assert "Documentation for all 3 applicants" in content.required_docs
        assert any("Nationality: Indian" in doc for doc in content.required_docs)

    def test_skipped_refusal_is_not_mentioned(self):
        """A skip token for previous refusals adds nothing."""
        content = compose_content(["visa_c"], FieldRecord(previous_refusals="N/A"))

        assert not any("previous refusal" in doc for doc in content.required_docs)


class TestMerge:
    """Tests for merging several categories."""

    def test_scope_lists_labels_in_canonical_order(self):
        """Merged scope names the categories in canonical order."""
        content = compose_content(["compliance", "real_estate"], FieldRecord())

        assert content.scope_paragraph.startswith(f"{MULTI_SCOPE_PREFIX}Real Estate, Compliance.")

    def test_sections_renumbered_across_categories(self):
        """Sections are flattened and numbered 2.1..2.n."""
        content = compose_content(["real_estate", "tax_consulting"], FieldRecord())

        numbers = [s.heading.split(" ", 1)[0] for s in content.sections]
        assert numbers == [f"2.{i}" for i in range(1, 7)]
        assert content.sections[4].heading == "2.5 Initial Assessment (Tax Consulting)"

    def test_documents_deduplicated(self):
        """Shared documents appear once across categories."""
        content = compose_content(["visa_c", "visa_d"], FieldRecord())

        assert content.required_docs.count("Passport-size photographs") == 1
        assert content.required_docs.count("Proof of accommodation in Albania") == 1

    def test_next_steps_wrapped(self):
        """Merged next steps start with engagement and end with completion."""
        content = compose_content(["tax_consulting", "compliance"], FieldRecord())

        assert content.next_steps[:2] == [ENGAGEMENT_STEP, INITIAL_PAYMENT_STEP]
        assert content.next_steps[-1] == COMPLETION_STEP

    def test_timeline_concatenated(self):
        """Timeline entries are concatenated in canonical order."""
        content = compose_content(["tax_consulting", "real_estate"], FieldRecord())

        assert content.timeline[0].startswith("Real Estate")
        assert content.timeline[-1].startswith("Tax Consulting")

    def test_merge_process_steps(self):
        """Merged process steps exist only when some part has them."""
        with_pensioner = compose_content(["residency_pensioner", "compliance"], FieldRecord())
        without = compose_content(["real_estate", "compliance"], FieldRecord())

        assert with_pensioner.has_process_steps
        assert without.process_steps is None

    @pytest.mark.parametrize("services", [
        ["real_estate", "visa_c", "compliance"],
        ["company_formation", "residency_permit"],
    ])
    def test_order_independent(self, services):
        """Any order of the same service set composes identical content."""
        fields = FieldRecord(nationality="German")

        assert compose_content(services, fields) == compose_content(list(reversed(services)), fields)

    def test_deterministic(self):
        """Composing twice gives equal content."""
        fields = FieldRecord(number_of_applicants=2)

        assert compose_content(["visa_d", "real_estate"], fields) == compose_content(["visa_d", "real_estate"], fields)


class TestDedupeDocuments:
    """Tests for dedupe_documents."""

    def test_case_and_whitespace_insensitive(self):
        docs = ["Passport copy", "  passport COPY ", "Bank statement"]

        assert dedupe_documents(docs) == ["Passport copy", "Bank statement"]

    def test_keeps_first_seen_order(self):
        assert dedupe_documents(["b", "a", "b", "c"]) == ["b", "a", "c"]


class TestBuildCategoryContent:
    """Tests for the content builder registry."""

    def test_every_category_has_a_builder(self):
        for category in ServiceCategory:
            assert build_category_content(category, FieldRecord()).scope_paragraph

    def test_missing_builder_raises(self, monkeypatch):
        monkeypatch.delitem(builders.CONTENT_BUILDERS, ServiceCategory.COMPLIANCE)

        with pytest.raises(UnsupportedCategoryError):
            build_category_content(ServiceCategory.COMPLIANCE, FieldRecord())
