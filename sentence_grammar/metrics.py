from prometheus_client import Counter, Histogram

METRIC_PREFIX = 'grammar_'

grammar_analysis_metrics_label_names = [
    'tense',
    'sentence_type',
    'complexity',
]
GRAMMAR_ANALYSIS_METRICS = {
    'analyses': Counter(
        METRIC_PREFIX + 'analyses_total',
        'Total number of analyzed sentences',
        labelnames=grammar_analysis_metrics_label_names,
    ),
    'analysis_time': Histogram(
        METRIC_PREFIX + 'analysis_time_seconds',
        'Time spent analyzing a sentence',
        buckets=(0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1),
    ),
    'words': Histogram(
        METRIC_PREFIX + 'analysis_words',
        'Number of words in analyzed sentences',
        buckets=(1, 3, 5, 8, 12, 20, 30, 50, 100),
    ),
    'rejected': Counter(
        METRIC_PREFIX + 'analyses_rejected_total',
        'Total number of sentences rejected before analysis',
        labelnames=['reason'],
    ),
}
