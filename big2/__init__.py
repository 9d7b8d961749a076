"""锄大地（Big Two）规则引擎"""
