"""Provider implementations: dns (real upstream), workers and analytics (mocked)."""
