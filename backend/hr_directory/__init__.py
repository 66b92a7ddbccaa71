"""HR directory backend: employee store, search, org chart and P&L analytics."""
