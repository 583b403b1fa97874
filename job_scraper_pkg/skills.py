from typing import Iterable, List, Optional, Sequence, Tuple


# Canonical labels, grouped roughly by area. Output follows this order.
DEFAULT_SKILL_CATALOG: Tuple[str, ...] = (
    # frontend
    "Vue", "Angular", "React",
    "JavaScript", "TypeScript",
    "HTML", "CSS", "Sass", "SCSS", "Less",
    "Webpack", "Vite", "Rollup", "Gulp",
    "jQuery",
    "小程序", "uni-app", "uniapp",
    "移动端", "H5", "响应式",
    # backend
    "Java", "Python",
    "C++", "Go", "Golang",
    "Node.js", "Express", "Koa",
    "Spring", "SpringBoot", "MyBatis",
    "PHP", ".NET", "ASP.NET",
    # databases
    "MySQL", "PostgreSQL", "MongoDB",
    "Redis", "Oracle",
    "Elasticsearch",
    # tooling and ops
    "Docker", "Kubernetes", "K8s",
    "Git", "SVN", "Linux",
    "Nginx", "Apache",
    # AI / ML
    "AI", "机器学习", "深度学习", "TensorFlow",
    "PyTorch", "神经网络", "NLP", "计算机视觉",
    # architecture and practice
    "RESTful", "GraphQL", "gRPC", "微服务",
    "分布式", "高并发", "性能优化",
    "自动化测试", "TDD", "BDD", "单元测试",
    # UI libraries and cross-platform
    "Ant Design", "Element UI", "Vuex", "Redux",
    "React Native", "Flutter",
    "WebSocket", "HTTP/HTTPS",
)


class SkillExtractor:
    """Tag free text with the catalog labels it mentions.

    Matching is case-insensitive substring containment. The result keeps
    catalog order and holds each label at most once.
    """

    def __init__(self, catalog: Iterable[str] = DEFAULT_SKILL_CATALOG):
        self.catalog: Tuple[str, ...] = tuple(catalog)
        self._needles = tuple((label, label.lower()) for label in self.catalog)

    def extract(self, text: Optional[str]) -> List[str]:
        if not text:
            return []
        subject = text.lower()
        found: List[str] = []
        for label, needle in self._needles:
            if needle in subject and label not in found:
                found.append(label)
        return found

    __call__ = extract


def extract_skills(text: Optional[str], catalog: Sequence[str] = DEFAULT_SKILL_CATALOG) -> List[str]:
    return SkillExtractor(catalog).extract(text)
