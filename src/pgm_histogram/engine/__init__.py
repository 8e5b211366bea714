from pgm_histogram.engine.compute import (
    compute_histogram,
    dispatch_spans,
    histogram_image,
    main_compute,
    run_worker,
)

__all__ = ["compute_histogram", "dispatch_spans", "histogram_image", "main_compute", "run_worker"]
