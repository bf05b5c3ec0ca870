"""Process exit statuses reported by the notmuch front end."""

EXIT_SUCCESS = 0
EXIT_FAILURE = 1

# A caller asked for a structured output format the CLI no longer emits.
EXIT_FORMAT_TOO_OLD = 20
# A caller asked for a structured output format newer than this CLI.
EXIT_FORMAT_TOO_NEW = 21
