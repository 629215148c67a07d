"""
Sentiment labeling core.

- classifier: SentimentClassifier, ClassifierConfig, parse_reply
- labels: LabelSet, LabelReconciler
- pipeline: SentimentPipeline
- samples: SampleEmailGenerator
"""

from inbox_sentiment.sentiment.classifier import ClassifierConfig, SentimentClassifier, parse_reply
from inbox_sentiment.sentiment.labels import LabelReconciler, LabelSet
from inbox_sentiment.sentiment.pipeline import SentimentPipeline
from inbox_sentiment.sentiment.samples import SampleEmailGenerator

__all__ = [
    "ClassifierConfig",
    "SentimentClassifier",
    "parse_reply",
    "LabelReconciler",
    "LabelSet",
    "SentimentPipeline",
    "SampleEmailGenerator",
]
