from .pipeline import run_pipeline

run_pipeline()
