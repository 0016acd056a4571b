from mtg_card_stats import DashboardState

FILTER_LABELS = {
    "all": "🎯 All",
    "W": "⚪ W",
    "U": "🔵 U",
    "B": "⚫ B",
    "R": "🔴 R",
    "G": "🟢 G",
    "C": "⚙️ C",
    "Gold": "✨ Gold",
}


def format_total(total: int) -> str:
    """Format the visible card count for display in UI."""
    return f"### Total Cards: {total}"


def format_load_status(state: DashboardState) -> str:
    """Format the dashboard load status for display in UI."""
    if state.last_error is not None:
        return f"❌ Failed to load card data: {state.last_error}"
    if not state.is_ready:
        return "⏳ Loading card data..."
    label = FILTER_LABELS.get(state.active_filter, state.active_filter)
    return f"✅ Loaded {len(state.records)} cards (filter: {label})"
