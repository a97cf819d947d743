"""Import the node classes of the PDDL abstract syntax tree."""

from .constraints import Always as Always
from .constraints import AlwaysWithin as AlwaysWithin
from .constraints import AtEnd as AtEnd
from .constraints import AtMostOnce as AtMostOnce
from .constraints import Con2GD as Con2GD
from .constraints import ConGD as ConGD
from .constraints import ConstraintAnd as ConstraintAnd
from .constraints import ConstraintForall as ConstraintForall
from .constraints import ConstraintPreference as ConstraintPreference
from .constraints import DurationConstraint as DurationConstraint
from .constraints import DurationOp as DurationOp
from .constraints import DurationValue as DurationValue
from .constraints import HoldAfter as HoldAfter
from .constraints import HoldDuring as HoldDuring
from .constraints import PrefConGD as PrefConGD
from .constraints import PrefConstraintAnd as PrefConstraintAnd
from .constraints import PrefConstraintForall as PrefConstraintForall
from .constraints import SimpleDurationConstraint as SimpleDurationConstraint
from .constraints import Sometime as Sometime
from .constraints import SometimeAfter as SometimeAfter
from .constraints import SometimeBefore as SometimeBefore
from .constraints import TimedDurationConstraint as TimedDurationConstraint
from .constraints import Within as Within
from .domain import Domain as Domain
from .effects import AssignNumericFluent as AssignNumericFluent
from .effects import AssignObjectFluent as AssignObjectFluent
from .effects import AtomicEffect as AtomicEffect
from .effects import CEffect as CEffect
from .effects import ConditionalEffect as ConditionalEffect
from .effects import ContinuousEffect as ContinuousEffect
from .effects import DurativeActionEffect as DurativeActionEffect
from .effects import DurativeEffectConjunction as DurativeEffectConjunction
from .effects import DurativeForallEffect as DurativeForallEffect
from .effects import DurativeWhenEffect as DurativeWhenEffect
from .effects import Effects as Effects
from .effects import ForallEffect as ForallEffect
from .effects import NotAtomicEffect as NotAtomicEffect
from .effects import PEffect as PEffect
from .effects import TimedConditionalEffect as TimedConditionalEffect
from .effects import TimedEffect as TimedEffect
from .effects import TimedFluentEffect as TimedFluentEffect
from .effects import WhenEffect as WhenEffect
from .expressions import DURATION as DURATION
from .expressions import TOTAL_TIME as TOTAL_TIME
from .expressions import BinaryOpExp as BinaryOpExp
from .expressions import DurationVariable as DurationVariable
from .expressions import FAssignDa as FAssignDa
from .expressions import FComp as FComp
from .expressions import FExp as FExp
from .expressions import FExpDa as FExpDa
from .expressions import FExpT as FExpT
from .expressions import FHead as FHead
from .expressions import IsViolated as IsViolated
from .expressions import MetricFExp as MetricFExp
from .expressions import MetricFunction as MetricFunction
from .expressions import MultiOpExp as MultiOpExp
from .expressions import NegativeExp as NegativeExp
from .expressions import TotalTime as TotalTime
from .formulas import AtomicFormula as AtomicFormula
from .formulas import AtomicFormulaSkeleton as AtomicFormulaSkeleton
from .formulas import AtomicFunctionSkeleton as AtomicFunctionSkeleton
from .formulas import Equality as Equality
from .formulas import Literal as Literal
from .formulas import PredicateFormula as PredicateFormula
from .goals import And as And
from .goals import AtTimedGD as AtTimedGD
from .goals import Conjunction as Conjunction
from .goals import Disjunction as Disjunction
from .goals import DurativeActionGoalDefinition as DurativeActionGoalDefinition
from .goals import DurativeConjunction as DurativeConjunction
from .goals import DurativeForall as DurativeForall
from .goals import Exists as Exists
from .goals import Existential as Existential
from .goals import ForAll as ForAll
from .goals import GoalDefinition as GoalDefinition
from .goals import Implication as Implication
from .goals import Imply as Imply
from .goals import Negation as Negation
from .goals import Not as Not
from .goals import Or as Or
from .goals import OverTimedGD as OverTimedGD
from .goals import PreconditionForall as PreconditionForall
from .goals import PreconditionGoalDefinition as PreconditionGoalDefinition
from .goals import PreconditionGoalDefinitions as PreconditionGoalDefinitions
from .goals import Preference as Preference
from .goals import PreferenceGD as PreferenceGD
from .goals import PrefTimedGD as PrefTimedGD
from .goals import TimedGD as TimedGD
from .goals import TimedPreference as TimedPreference
from .goals import Universal as Universal
from .number import Number as Number
from .operators import AssignOp as AssignOp
from .operators import AssignOpT as AssignOpT
from .operators import BinaryComp as BinaryComp
from .operators import BinaryOp as BinaryOp
from .operators import DOp as DOp
from .operators import Interval as Interval
from .operators import MultiOp as MultiOp
from .operators import Optimization as Optimization
from .operators import TimeSpecifier as TimeSpecifier
from .problem import InitElement as InitElement
from .problem import LengthSpec as LengthSpec
from .problem import MetricSpec as MetricSpec
from .problem import NumericFluentValue as NumericFluentValue
from .problem import ObjectFluentValue as ObjectFluentValue
from .problem import Problem as Problem
from .problem import TimedLiteral as TimedLiteral
from .requirements import Requirement as Requirement
from .requirements import Requirements as Requirements
from .structure import ActionDefinition as ActionDefinition
from .structure import DerivedPredicate as DerivedPredicate
from .structure import DurativeActionDefinition as DurativeActionDefinition
from .structure import StructureDef as StructureDef
from .symbols import NUMBER as NUMBER
from .symbols import OBJECT as OBJECT
from .symbols import FunctionSymbol as FunctionSymbol
from .symbols import Name as Name
from .symbols import Predicate as Predicate
from .symbols import PreferenceName as PreferenceName
from .symbols import PrimitiveType as PrimitiveType
from .symbols import Variable as Variable
from .symbols import is_valid_name as is_valid_name
from .terms import BasicFunctionTerm as BasicFunctionTerm
from .terms import FunctionTerm as FunctionTerm
from .terms import Term as Term
from .typed import NUMBER_TYPE as NUMBER_TYPE
from .typed import OBJECT_TYPE as OBJECT_TYPE
from .typed import EitherType as EitherType
from .typed import ExactType as ExactType
from .typed import Type as Type
from .typed import Typed as Typed
from .typed import TypedList as TypedList
