"""Pure domain logic: search ranking, hierarchy layout and P&L reductions."""
