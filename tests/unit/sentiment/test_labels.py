"""Unit tests for LabelSet and LabelReconciler."""

from unittest.mock import MagicMock, call

import pytest

from inbox_sentiment.mailbox.base import MailThread
from inbox_sentiment.models.enums import SentimentEnum, SentimentLabel
from inbox_sentiment.models.mail_models import Label
from inbox_sentiment.sentiment.labels import DEFAULT_LABEL_NAMES, LabelReconciler, LabelSet


SENTIMENT_NAMES = {label.value for label in SentimentLabel}


def sentiment_labels_on(thread) -> set[str]:
    return {label.name for label in thread.get_labels()} & SENTIMENT_NAMES


@pytest.fixture
def reconciler(mailbox):
    return LabelReconciler(mailbox)


@pytest.fixture
def thread(mailbox):
    return mailbox.add_thread([mailbox.new_message(plain_body="hello")])


class TestLabelNames:

    def test_display_names_are_fixed(self):
        assert DEFAULT_LABEL_NAMES == {
            SentimentEnum.POSITIVE: "HAPPY TONE 😊",
            SentimentEnum.NEUTRAL: "NEUTRAL TONE 😐",
            SentimentEnum.NEGATIVE: "UPSET TONE 😡",
            SentimentEnum.UNPROCESSED: "UNPROCESSED ⚠️",
        }

    def test_every_result_has_a_label(self):
        for result in SentimentEnum:
            assert SentimentLabel.for_result(result).name == result.name


class TestLabelSet:

    def test_rejects_incomplete_mapping(self):
        with pytest.raises(ValueError):
            LabelSet({SentimentEnum.POSITIVE: Label(id="1", name="HAPPY TONE 😊")})

    def test_iterates_all_four(self, reconciler):
        label_set = reconciler.resolve_labels()

        assert len(label_set) == 4
        assert {label.name for label in label_set} == SENTIMENT_NAMES

    def test_resolve_with_custom_names(self, mailbox):
        names = {result: f"sentiment/{result.value}" for result in SentimentEnum}

        label_set = LabelSet.resolve(mailbox, names)

        assert label_set.for_result(SentimentEnum.NEGATIVE).name == "sentiment/negative"
        assert mailbox.get_label_by_name("sentiment/unprocessed") in label_set


class TestResolveLabels:

    def test_creates_missing_labels(self, mailbox, reconciler):
        label_set = reconciler.resolve_labels()

        for result, name in DEFAULT_LABEL_NAMES.items():
            assert mailbox.get_label_by_name(name) == label_set.for_result(result)

    def test_reuses_existing_labels(self, mailbox):
        existing = mailbox.create_label("UPSET TONE 😡")

        label_set = LabelReconciler(mailbox).resolve_labels()

        assert label_set.for_result(SentimentEnum.NEGATIVE) == existing

    def test_lookup_by_name_happens_once_per_reconciler(self):
        mailbox = MagicMock()
        mailbox.get_label_by_name.side_effect = lambda name: Label(id=name, name=name)
        reconciler = LabelReconciler(mailbox)

        reconciler.resolve_labels()
        reconciler.resolve_labels()

        assert mailbox.get_label_by_name.call_count == 4
        mailbox.create_label.assert_not_called()

    def test_create_only_when_absent(self):
        mailbox = MagicMock()
        mailbox.get_label_by_name.return_value = None
        mailbox.create_label.side_effect = lambda name: Label(id=name, name=name)

        LabelReconciler(mailbox).resolve_labels()

        assert mailbox.create_label.call_args_list == [
            call(name) for name in DEFAULT_LABEL_NAMES.values()
        ]


class TestReconcile:

    @pytest.mark.parametrize("result", list(SentimentEnum))
    def test_exactly_one_label_after_reconcile(self, reconciler, thread, result):
        reconciler.reconcile(thread, result)

        assert sentiment_labels_on(thread) == {SentimentLabel.for_result(result).value}

    def test_idempotent(self, reconciler, thread):
        reconciler.reconcile(thread, SentimentEnum.POSITIVE)
        first = thread.get_labels()
        reconciler.reconcile(thread, SentimentEnum.POSITIVE)

        assert thread.get_labels() == first
        assert sentiment_labels_on(thread) == {"HAPPY TONE 😊"}

    def test_replaces_stale_label(self, reconciler, thread):
        reconciler.reconcile(thread, SentimentEnum.UNPROCESSED)
        reconciler.reconcile(thread, SentimentEnum.NEGATIVE)

        assert sentiment_labels_on(thread) == {"UPSET TONE 😡"}

    def test_cleans_up_multiple_preexisting_labels(self, reconciler, thread):
        label_set = reconciler.resolve_labels()
        for label in label_set:
            thread.add_label(label)

        reconciler.reconcile(thread, SentimentEnum.NEUTRAL, label_set)

        assert sentiment_labels_on(thread) == {"NEUTRAL TONE 😐"}

    def test_leaves_other_labels_alone(self, mailbox, reconciler, thread):
        other = mailbox.create_label("Invoices")
        thread.add_label(other)

        reconciler.reconcile(thread, SentimentEnum.POSITIVE)

        assert other in thread.get_labels()

    def test_single_replace_call(self, reconciler):
        label_set = reconciler.resolve_labels()
        thread = MagicMock(spec=MailThread)
        thread.id = "thread-x"

        reconciler.reconcile(thread, SentimentEnum.NEGATIVE, label_set)

        target = label_set.for_result(SentimentEnum.NEGATIVE)
        assert thread.method_calls == [call.replace_labels(list(label_set), target)]
