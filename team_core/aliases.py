# FILE: team_core/aliases.py
ALIASES = {
    "name": ["Name", "Participant", "Member", "Full Name", "Player"],
    "notes": ["Notes", "Note", "Comment"],
}

def map_headers(df):
    """
    Map input DataFrame columns to expected canonical names using aliases.
    Returns (renamed_df, mapping_report).
    """
    mapping = {}
    rename_cols = {}
    for col in df.columns:
        matched = False
        key = str(col).strip().lower()
        for canon, aliases in ALIASES.items():
            if key == canon.lower() or key in [alias.lower() for alias in aliases]:
                rename_cols[col] = canon
                mapping[col] = canon
                matched = True
                break
        if not matched:
            mapping[col] = None
    df = df.rename(columns=rename_cols)
    return df, mapping
