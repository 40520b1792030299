[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aprildetect"
version = "0.1.0"
description = "Detection and decoding of square fiducial tags in grayscale images, with pose recovery"
requires-python = ">=3.10"
keywords = [
    "fiducial",
    "tag detection",
    "computer vision",
    "homography",
    "pose estimation",
    "robotics",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Image Recognition",
]
dependencies = [
    "numpy",
    "pillow",
    "pyserial",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
aprildetect-demo = "aprildetect.demo:main"
aprildetect-imu = "aprildetect.imu:main"

[tool.hatch.build.targets.wheel]
packages = ["aprildetect"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
