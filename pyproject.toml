[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "sysbro"
version = "1.0.0"
description = "Small Linux desktop helpers: autostart entries, file shredding, boot time, parcel tracking, download speed test and input-method skin conversion"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "autostart",
    "desktop-entry",
    "shredder",
    "boot-time",
    "speed-test",
    "parcel-tracking",
    "fcitx",
    "skin",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sysbro-delete-files = "sysbro.shredder:main"
sysbro-boot-assistant = "sysbro.boot_time:main"
sysbro-express = "sysbro.express:main"
sysbro-network-test = "sysbro.speedtest:main"
ssf2fcitx = "sysbro.skin:main"

[tool.setuptools]
packages = ["sysbro"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
