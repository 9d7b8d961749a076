# 终端展示模块
