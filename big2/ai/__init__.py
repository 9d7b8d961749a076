# AI 出牌策略模块
from .rule_ai import RuleAI
