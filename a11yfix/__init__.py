"""a11yfix - reconcile model-suggested accessibility fixes with HTML sources."""
