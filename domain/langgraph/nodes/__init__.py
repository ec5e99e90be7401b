from .profile_loader_node import profile_loader_node
from .project_detector_node import project_detector_node
from .preserved_data_node import preserved_data_node
from .question_nodes import project_questions_node, hook_questions_node
from .instructions_generator_node import instructions_generator_node
from .document_merger_node import document_merger_node
from .document_writer_node import document_writer_node

__all__ = [
    "profile_loader_node",
    "project_detector_node",
    "preserved_data_node",
    "project_questions_node",
    "hook_questions_node",
    "instructions_generator_node",
    "document_merger_node",
    "document_writer_node",
]
