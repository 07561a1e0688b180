"""Click plumbing shared by the ``epoch`` entry point."""
