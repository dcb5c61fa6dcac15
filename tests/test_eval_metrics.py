from rubyglot.eval.metrics import DetectionSample, summarize_detection


def test_summarize_detection() -> None:
    samples = [
        DetectionSample(expected="en", detected="en", stage="statistical", runtime_sec=0.01),
        DetectionSample(expected="en", detected="de", stage="fallback", runtime_sec=0.03),
        DetectionSample(expected="ja", detected="ja", stage="script", runtime_sec=0.0),
        DetectionSample(expected="ru", detected="xx", stage=None, runtime_sec=0.02),
    ]

    summary = summarize_detection(samples)

    assert summary["sample_count"] == 4.0
    assert summary["accuracy"] == 0.5
    assert summary["undetermined_rate"] == 0.25
    assert summary["stage_share_statistical"] == 0.25
    assert summary["stage_share_undetermined"] == 0.25
    assert summary["accuracy_en"] == 0.5
    assert summary["accuracy_ja"] == 1.0
    assert summary["mean_runtime_ms"] == 15.0


def test_summarize_detection_empty() -> None:
    assert summarize_detection([]) == {
        "sample_count": 0.0,
        "accuracy": 0.0,
        "undetermined_rate": 0.0,
    }
