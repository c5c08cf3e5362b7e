"""Core operations and process execution for GitDepend."""
