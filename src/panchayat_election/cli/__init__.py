"""Command-line interface for panchayat-election."""
