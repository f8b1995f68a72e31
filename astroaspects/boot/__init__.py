"""Process bootstrap helpers for applications embedding astroaspects."""
