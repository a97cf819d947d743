"""Import the PDDL grammar: spans, combinators, grammar rules, and the parser entry point."""

from .combinators import Parser as Parser
from .combinators import alt as alt
from .combinators import empty_or as empty_or
from .combinators import function_typed_list as function_typed_list
from .combinators import keyword_enum as keyword_enum
from .combinators import map_parser as map_parser
from .combinators import opt as opt
from .combinators import optional_sections as optional_sections
from .combinators import parens as parens
from .combinators import parse_type as parse_type
from .combinators import preceded as preceded
from .combinators import prefix_expr as prefix_expr
from .combinators import separator as separator
from .combinators import space_separated_list0 as space_separated_list0
from .combinators import space_separated_list1 as space_separated_list1
from .combinators import spaced as spaced
from .combinators import tag as tag
from .combinators import typed_list as typed_list
from .combinators import ws as ws
from .constraints import parse_con2_gd as parse_con2_gd
from .constraints import parse_con_gd as parse_con_gd
from .constraints import parse_d_op as parse_d_op
from .constraints import parse_d_value as parse_d_value
from .constraints import parse_duration_constraint as parse_duration_constraint
from .constraints import parse_pref_con_gd as parse_pref_con_gd
from .constraints import parse_simple_duration_constraint as parse_simple_duration_constraint
from .domain import parse_constants_def as parse_constants_def
from .domain import parse_domain as parse_domain
from .domain import parse_domain_constraints_def as parse_domain_constraints_def
from .domain import parse_functions_def as parse_functions_def
from .domain import parse_predicates_def as parse_predicates_def
from .domain import parse_require_def as parse_require_def
from .domain import parse_requirement as parse_requirement
from .domain import parse_timeless_def as parse_timeless_def
from .domain import parse_types_def as parse_types_def
from .effects import parse_assign_op_t as parse_assign_op_t
from .effects import parse_c_effect as parse_c_effect
from .effects import parse_cond_effect as parse_cond_effect
from .effects import parse_da_effect as parse_da_effect
from .effects import parse_effect as parse_effect
from .effects import parse_p_effect as parse_p_effect
from .effects import parse_timed_effect as parse_timed_effect
from .expressions import parse_assign_op as parse_assign_op
from .expressions import parse_binary_comp as parse_binary_comp
from .expressions import parse_binary_op as parse_binary_op
from .expressions import parse_f_assign_da as parse_f_assign_da
from .expressions import parse_f_comp as parse_f_comp
from .expressions import parse_f_exp as parse_f_exp
from .expressions import parse_f_exp_da as parse_f_exp_da
from .expressions import parse_f_exp_t as parse_f_exp_t
from .expressions import parse_f_head as parse_f_head
from .expressions import parse_metric_f_exp as parse_metric_f_exp
from .expressions import parse_multi_op as parse_multi_op
from .formulas import atomic_formula as atomic_formula
from .formulas import literal as literal
from .formulas import parse_atomic_formula as parse_atomic_formula
from .formulas import parse_atomic_formula_skeleton as parse_atomic_formula_skeleton
from .formulas import parse_atomic_function_skeleton as parse_atomic_function_skeleton
from .formulas import parse_basic_function_term as parse_basic_function_term
from .formulas import parse_function_term as parse_function_term
from .formulas import parse_literal as parse_literal
from .formulas import parse_term as parse_term
from .goals import parse_da_gd as parse_da_gd
from .goals import parse_gd as parse_gd
from .goals import parse_interval as parse_interval
from .goals import parse_pre_gd as parse_pre_gd
from .goals import parse_pref_gd as parse_pref_gd
from .goals import parse_pref_timed_gd as parse_pref_timed_gd
from .goals import parse_time_specifier as parse_time_specifier
from .goals import parse_timed_gd as parse_timed_gd
from .goals import quantified as quantified
from .goals import typed_variables as typed_variables
from .lexical import PDDLTokenType as PDDLTokenType
from .lexical import match_token as match_token
from .lexical import parse_function_symbol as parse_function_symbol
from .lexical import parse_integer as parse_integer
from .lexical import parse_name as parse_name
from .lexical import parse_number as parse_number
from .lexical import parse_predicate as parse_predicate
from .lexical import parse_pref_name as parse_pref_name
from .lexical import parse_primitive_type as parse_primitive_type
from .lexical import parse_variable as parse_variable
from .lexical import skip_whitespace as skip_whitespace
from .parser import PDDLParser as PDDLParser
from .parser import load_domain as load_domain
from .parser import load_problem as load_problem
from .problem import parse_goal_def as parse_goal_def
from .problem import parse_init_def as parse_init_def
from .problem import parse_init_el as parse_init_el
from .problem import parse_length_spec as parse_length_spec
from .problem import parse_metric_spec as parse_metric_spec
from .problem import parse_objects_def as parse_objects_def
from .problem import parse_optimization as parse_optimization
from .problem import parse_problem as parse_problem
from .problem import parse_problem_constraints_def as parse_problem_constraints_def
from .span import DEFAULT_MAX_NESTING_DEPTH as DEFAULT_MAX_NESTING_DEPTH
from .span import Rule as Rule
from .span import Span as Span
from .span import grammar_rule as grammar_rule
from .span import recursive_rule as recursive_rule
from .structure import parse_action_def as parse_action_def
from .structure import parse_da_def as parse_da_def
from .structure import parse_derived_predicate as parse_derived_predicate
from .structure import parse_structure_def as parse_structure_def
