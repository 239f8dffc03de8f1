[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "concurrency_lab"
version = "0.1.0"
description = "Small runnable exercises in threads, queues, pipelines, cancellation and prioritised task processing."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "concurrency",
    "threading",
    "producer-consumer",
    "pipeline",
    "worker-pool",
    "priority-queue",
    "cancellation",
    "exercises",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
concurrency-lab-greeting = "concurrency_lab.greeting:main"
concurrency-lab-producer-consumer = "concurrency_lab.producer_consumer:main"
concurrency-lab-pipeline = "concurrency_lab.pipeline:main"
concurrency-lab-counter = "concurrency_lab.counter:main"
concurrency-lab-worker-pool = "concurrency_lab.worker_pool:main"
concurrency-lab-cancellation = "concurrency_lab.cancellation:main"
concurrency-lab-task-processor = "concurrency_lab.task_processor:main"

[tool.hatch.build.targets.wheel]
packages = ["concurrency_lab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
