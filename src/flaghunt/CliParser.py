import argparse
import os

parser = argparse.ArgumentParser(
	description="Guess the country behind the flag"
)

# Catalog
parser.add_argument(
	"--catalog",
	help="JSON file holding the countries to play with ([{\"code\": \"fr\", \"name\": \"France\"}, ...])"
)

parser.add_argument(
	"--world",
	action="store_true",
	help="Play with every ISO 3166 country instead of the built-in selection"
)

parser.add_argument(
	"--seed",
	help="Random seed, for a reproducible sequence of flags",
	type=int
)

parser.add_argument(
	"--rounds",
	help="Stop after this many flags (play until 'q' otherwise)",
	type=int
)

# Facts
parser.add_argument(
	"--gemini-key",
	help="Gemini API key used to fetch country facts",
	default=os.environ.get("GEMINI_API_KEY")
)

parser.add_argument(
	"--model",
	help="Gemini model",
	default="gemini-2.5-flash"
)

parser.add_argument(
	"--timeout",
	help="Timeout of a fact request, in seconds",
	type=float,
	default=15.0
)

parser.add_argument(
	"--fact-wait",
	help="How long to wait for a fact before moving on, in seconds",
	type=float,
	default=20.0
)

parser.add_argument(
	"--offline",
	action="store_true",
	help="Use bundled country data for facts instead of Gemini"
)

parser.add_argument(
	"--no-fact",
	dest="fact",
	action="store_false",
	help="Disable facts after each guess"
)

# Logging
parser.add_argument(
	"--logs-path",
	help="Logs location",
	default="./flaghunt.log"
)

parser.add_argument(
	"--level",
	help="Minimum log level that will get outputted",
	choices=["trace", "debug", "info", "warning", "error", "critical"],
	default="warning"
)

parser.set_defaults(
	fact=True
)
