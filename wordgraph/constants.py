"""
Centralized constants for the word graph package.

Fixed algorithm parameters, in-band diagnostic messages and walk-log
terminators live here so every module reports the same text.
"""

# =============================================================================
# PAGERANK
# =============================================================================

# Fixed: not exposed through WordGraphConfig.
PAGERANK_DAMPING: float = 0.85
PAGERANK_ITERATIONS: int = 10

# =============================================================================
# RANDOM WALK
# =============================================================================

WALK_EDGE_SEPARATOR = "->"
PATH_SEPARATOR = " -> "

WALK_END_NO_NEIGHBORS = "[END-NO NEIGHBORS]\n"
WALK_END_CYCLE = "[END-CYCLE]\n"
WALK_INTERRUPTED = "[INTERRUPTED]\n"

# =============================================================================
# IN-BAND MESSAGES
# =============================================================================
# Analyses never raise for data conditions; these strings are returned instead.
# Collaborators may translate them, so treat them as opaque tokens.

MSG_NO_WORDS_IN_INPUT = "输入文本似乎不包含任何单词!"
MSG_EMPTY_GRAPH_WALK = "图为空，无法进行随机游走！"
MSG_WALK_INTERRUPTED = "游走被中断："
MSG_LOG_WRITE_FAILED = "写入日志文件失败："
MSG_INTERRUPT_MARK_FAILED = "写入中断标记失败："

MSG_BRIDGE_MISSING_WORD = 'No "{w1}" or "{w2}" in the graph!'
MSG_BRIDGE_NONE = 'No bridge words from "{w1}" to "{w2}"!'
MSG_BRIDGE_ONE = 'The bridge words from "{w1}" to "{w2}" is: {bridges}.'
MSG_BRIDGE_MANY = 'The bridge words from "{w1}" to "{w2}" are: {bridges}.'

MSG_PATH_SOURCE_MISSING = '起始单词 "{word}" 不在图中!'
MSG_PATH_TARGET_MISSING = '目标单词 "{word}" 不在图中!'
MSG_PATH_HEADER = "从 {source} 到 {target} 的所有最短路径:"
MSG_PATH_LINE = "{path} (距离: {distance})"
MSG_PATH_NONE_FROM_SOURCE = "从 {source} 到 {target} 没有路径"
MSG_PATH_NONE_TO_TARGET = "没有从 {source} 到 {target} 的路径。"

# Front-end messages (used by the command-line collaborator only)
MSG_GRAPH_BUILT = "图构建完成!"
MSG_READ_FAILED = "读取文件失败: {cause}"
MSG_PAGERANK_VALUE = "单词 '{word}' 的PageRank值为: {rank:.6f}"
MSG_WALK_PATH = "随机游走路径: {path}"
MSG_WALK_STOPPED = "随机游走中断"
MSG_EMPTY_GRAPH_RENDER = "图为空，无法生成图形文件！"
