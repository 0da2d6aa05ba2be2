"""Runtime services shared by the pipeline and its adapters."""
