[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "netlab"
version = "0.1.0"
description = "Small networking lab tools: CRC codewords, TCP and UDP clients and servers, and a UDP packet sender"
requires-python = ">=3.10"
dependencies = []
keywords = ["crc", "tcp", "udp", "sockets", "networking", "teaching"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
netlab-crc = "netlab.crc:main"
netlab-sendudp = "netlab.sendudp:main"
netlab-tcp-client = "netlab.tcp_client:main"
netlab-tcp-server = "netlab.tcp_server:main"
netlab-udp-client = "netlab.udp_client:main"
netlab-udp-server = "netlab.udp_server:main"

[tool.hatch.build.targets.wheel]
packages = ["netlab"]

[tool.pytest.ini_options]
addopts = "-ra"
