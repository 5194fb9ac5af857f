from simple_beam.domain.loads import PointLoad, DistributedLoad
from simple_beam.domain.supports import Support, SupportKind
from simple_beam.engine.equilibrium import solve_reactions, equilibrium_residuals
from simple_beam.services.summary import format_reaction


supports = [
    Support(x_m=8.0, kind=SupportKind.ROLLER),
    Support(x_m=1.0, kind=SupportKind.PIN),      # el orden no importa
]
point_loads = [
    PointLoad(x_m=3.0, P_kN=12.0),               # down+
]
dist_loads = [
    DistributedLoad(x1_m=0.0, x2_m=10.0, w1_kN_m=2.0, w2_kN_m=2.0),   # uniforme
    DistributedLoad(x1_m=4.0, x2_m=7.0, w1_kN_m=0.0, w2_kN_m=6.0),    # triangular
]

Ra, Rb = solve_reactions(supports, point_loads, dist_loads)
print(format_reaction(Ra))
print(format_reaction(Rb))

res_Fy, res_M_A = equilibrium_residuals((Ra, Rb), point_loads, dist_loads)
print("residual Fy =", res_Fy)
print("residual M_A =", res_M_A)
