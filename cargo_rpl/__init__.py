"""Cargo subcommand front-end for the RPL analysis driver."""

DIST_NAME = "cargo-rpl"
